from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple

from instance_docker.utils.logger import logger


def merge_tags(*tag_maps: Optional[Mapping[str, str]]) -> Tuple[List[str], Dict[str, str]]:
    """Merge tag maps in order; the last map to set a key wins.

    Returns the sorted list of all keys and the merged mapping. Sorted keys
    keep label sets and list filters predictable.
    """
    keys: List[str] = []
    tags: Dict[str, str] = {}

    for tag_map in tag_maps:
        if not tag_map:
            continue
        for key, value in tag_map.items():
            if key in tags:
                logger.warning(f"Overwriting tag value for key {key}")
            else:
                keys.append(key)
            tags[key] = value

    keys.sort()
    return keys, tags


__all__ = ["merge_tags"]

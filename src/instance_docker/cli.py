"""Command-line interface for instance-docker."""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from pathlib import Path
from typing import List, Optional

from docker.errors import DockerException

from instance_docker import __version__
from instance_docker.config import load_settings, parse_tag_list, parse_tags
from instance_docker.core.errors import InstancePluginError
from instance_docker.core.models import InstanceSpec
from instance_docker.core.request import example_request, validate_properties
from instance_docker.main import build_plugin, run


def _read_properties(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text()


def _add_docker_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--docker-url",
        default=None,
        help="Docker daemon URL (default: from DOCKER_HOST / environment)"
    )
    parser.add_argument(
        "--namespace-tags",
        default=None,
        help="Namespace tags as k=v,k2=v2 (default: INSTANCE_DOCKER_NAMESPACE_TAGS)"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the instance-docker CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = argparse.ArgumentParser(
        prog="instance-docker",
        description="instance-docker - Docker instance plugin"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands"
    )

    # Server command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the plugin API server"
    )
    serve_parser.add_argument("--name", default=None, help="Plugin name")
    serve_parser.add_argument("--host", default=None, help="Host to bind to (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind to (default: 8000)")
    serve_parser.add_argument("--socket", default=None, help="Unix socket to listen on instead of TCP")
    _add_docker_options(serve_parser)

    # Version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    # Example properties command
    subparsers.add_parser(
        "example",
        help="Print example instance properties"
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate instance properties read from a file ('-' for stdin)"
    )
    validate_parser.add_argument("properties")

    provision_parser = subparsers.add_parser(
        "provision",
        help="Provision an instance from properties read from a file ('-' for stdin)"
    )
    provision_parser.add_argument("properties")
    provision_parser.add_argument("--tag", action="append", default=[], help="Instance tag k=v (repeatable)")
    provision_parser.add_argument("--logical-id", default=None, help="Logical ID (IP address) of the instance")
    _add_docker_options(provision_parser)

    describe_parser = subparsers.add_parser(
        "describe",
        help="Describe the live instances carrying the given tags"
    )
    describe_parser.add_argument("--tag", action="append", default=[], help="Group tag k=v (repeatable)")
    _add_docker_options(describe_parser)

    destroy_parser = subparsers.add_parser(
        "destroy",
        help="Destroy an instance"
    )
    destroy_parser.add_argument("instance_id")
    _add_docker_options(destroy_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "version":
        print(f"instance-docker version {__version__}")
        return 0

    try:
        settings = load_settings()
        if hasattr(args, "docker_url"):
            namespace_tags = settings.namespace_tags
            if args.namespace_tags is not None:
                namespace_tags = parse_tag_list(args.namespace_tags)
            settings = dataclasses.replace(
                settings,
                docker_host=args.docker_url or settings.docker_host,
                namespace_tags=namespace_tags,
            )
        tags = parse_tags(args.tag) if hasattr(args, "tag") else {}
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.command == "serve":
        settings = dataclasses.replace(
            settings,
            name=args.name or settings.name,
            listen_host=args.host or settings.listen_host,
            listen_port=args.port if args.port is not None else settings.listen_port,
            socket_path=args.socket or settings.socket_path,
        )
        run(settings)
        return 0

    try:
        if args.command == "example":
            print(json.dumps(example_request().to_wire(), indent=2))
            return 0

        if args.command == "validate":
            validate_properties(_read_properties(args.properties))
            print("OK")
            return 0

        plugin = build_plugin(settings)

        if args.command == "provision":
            spec = InstanceSpec(
                properties=_read_properties(args.properties),
                tags=tags,
                logical_id=args.logical_id,
            )
            print(plugin.provision(spec))
            return 0

        if args.command == "describe":
            descriptions = [d.to_wire() for d in plugin.describe_instances(tags)]
            print(json.dumps(descriptions, indent=2))
            return 0

        if args.command == "destroy":
            plugin.destroy(args.instance_id)
            return 0

    except (InstancePluginError, DockerException, OSError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())

"""yag entry point.

Usage:
    yag [-v] pr get ID
    yag [-v] pr list [--author NAME | --me] [--page N]
    yag [-v] pr create [TITLE] [-b BASE] [-H HEAD]
    yag [-v] pr close ID
    yag [-v] pr open [ID]
    yag [-v] profile add

`mr` is an alias of `pr`.
"""

import argparse
import logging
import sys
from pathlib import Path

from yag import __version__
from yag.config import load_config
from yag.errors import YagError
from yag.logging import YagLogging


def _add_pr_parser(sub: argparse._SubParsersAction) -> None:
    pr = sub.add_parser(
        "pr",
        aliases=["mr"],
        help="Manage pull requests (aka. merge requests for GitLab)",
    )
    pr_sub = pr.add_subparsers(dest="pr_command")

    get = pr_sub.add_parser("get", help="Get detail of single pull request")
    get.add_argument("id", type=int)

    open_ = pr_sub.add_parser("open", help="Open pull request in browser")
    open_.add_argument("id", type=int, nargs="?", default=None)

    close = pr_sub.add_parser("close", help="Close pull request")
    close.add_argument("id", type=int)

    list_ = pr_sub.add_parser("list", help="List open pull requests of current repository")
    list_.add_argument("--author", default=None, help="Only pull requests by this user")
    list_.add_argument("--me", action="store_true", help="Only my pull requests (wins over --author)")
    list_.add_argument("--page", type=int, default=None, help="Page number, from 1")

    create = pr_sub.add_parser("create", aliases=["new"], help="Create a new pull request")
    create.add_argument("title", nargs="?", default=None, help="Default: latest commit message")
    create.add_argument("-b", "--base", "--target", dest="base", default=None, help="Target branch")
    create.add_argument("-H", "--head", "--source", dest="head", default=None, help="Default: current branch")
    create.set_defaults(pr_command="create")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI: global options and pr/profile subcommands."""
    argv = argv if argv is not None else sys.argv[1:]

    parser = argparse.ArgumentParser(
        prog="yag",
        description="Manage pull requests of GitHub and self-hosted GitLab repositories",
    )
    parser.add_argument("--version", action="version", version=f"yag {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose mode")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default ~/.yag/config.yaml)",
    )

    sub = parser.add_subparsers(dest="command")
    _add_pr_parser(sub)

    profile = sub.add_parser("profile", help="Manage profiles")
    profile_sub = profile.add_subparsers(dest="profile_command")
    profile_sub.add_parser("add", help="Add profile config interactively")

    parsed = parser.parse_args(argv)
    if parsed.command == "mr":
        parsed.command = "pr"
    parsed.usage = parser.format_help()
    return parsed


def main(argv: list[str] | None = None) -> int:
    """Entry point: dispatch to pr or profile commands."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        YagLogging(config.logging, verbose=args.verbose).setup()
        logging.getLogger("yag").debug("verbose mode enabled")

        if args.command == "pr":
            from yag.commands import PullRequestCommand

            return PullRequestCommand(config).run(args)
        if args.command == "profile":
            from yag.commands import ProfileCommand

            return ProfileCommand(config).run(args)
    except YagError as e:
        print(f"ERROR {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 1

    print(args.usage)
    return 0


if __name__ == "__main__":
    sys.exit(main())

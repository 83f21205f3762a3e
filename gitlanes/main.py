#!/usr/bin/env python3
"""
gitlanes - lay out a repository's history as lanes and colors
"""

import argparse
import json
import logging
import sys
from typing import Any

import pygit2

from gitlanes.config.settings import Settings
from gitlanes.git_backend.repository import GraphRepository
from gitlanes.graph.session import GraphSession


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="gitlanes",
        description="Print the lane layout of a git history graph",
    )
    parser.add_argument(
        "repo",
        nargs="?",
        default=None,
        help="Repository path (default: the repository containing the current directory)",
    )
    parser.add_argument(
        "-n",
        "--page-size",
        type=int,
        default=None,
        help="Commits per page (default from settings)",
    )
    parser.add_argument(
        "--pages",
        type=int,
        default=1,
        help="Number of pages to load, 0 for the whole history",
    )
    parser.add_argument("--no-tags", action="store_true", help="Do not treat tags as heads")
    parser.add_argument("--remotes", action="store_true", help="Include remote branches")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log layout decisions")
    return parser.parse_args(argv)


def load_session(args: argparse.Namespace, settings: Settings) -> GraphSession:
    """Read the requested pages from the repository into a new session"""
    repo = GraphRepository(args.repo)
    page_size = args.page_size if args.page_size is not None else settings.get_page_size()
    include_tags = settings.get_include_tags() and not args.no_tags
    include_remotes = settings.get_include_remotes() or args.remotes

    heads = repo.get_heads(include_tags=include_tags, include_remotes=include_remotes)
    session = GraphSession(settings.get_palette())

    for loaded, page in enumerate(repo.iter_pages(heads, page_size), start=1):
        session.extend(page, heads)
        if args.pages and loaded >= args.pages:
            break

    return session


def format_text(session: GraphSession) -> str:
    """One line per row: lane, color, commit, head names, active lanes, summary"""
    width = max(session.lane_count, 1) * 2 + 1
    lines = []
    for commit, lanes in zip(session.commits, session.rows):
        rail = [" "] * width
        for lane in lanes:
            rail[lane * 2] = "|"
        assert commit.lane is not None
        rail[commit.lane * 2] = "*"

        refs = session.heads.names(commit.oid)
        ref_text = f" ({', '.join(refs)})" if refs else ""
        lines.append(
            f"{''.join(rail)} {commit.lane:>2} {commit.color} {commit.short_id}{ref_text} {commit.summary}"
        )
    return "\n".join(lines)


def format_json(session: GraphSession) -> str:
    data: dict[str, Any] = {
        "commits": [
            {
                "oid": c.oid,
                "parents": c.parents,
                "committed_date": c.committed_date,
                "summary": c.summary,
                "lane": c.lane,
                "color": c.color,
                "is_head": c.is_head,
                "heads": session.heads.names(c.oid),
            }
            for c in session.commits
        ],
        "rows": session.rows,
    }
    return json.dumps(data, indent=2)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings()
        session = load_session(args, settings)
    except (ValueError, pygit2.GitError) as e:
        print(f"gitlanes: {e}", file=sys.stderr)
        return 1

    print(format_json(session) if args.json else format_text(session))
    return 0


if __name__ == "__main__":
    sys.exit(main())

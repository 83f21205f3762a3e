"""
Commit source backed by a local git repository, using pygit2
"""

import logging
from collections.abc import Iterator
from itertools import islice
from pathlib import Path

import pygit2

from gitlanes.graph.types import Commit, Head

logger = logging.getLogger(__name__)

TAG_PREFIX = "refs/tags/"


class GraphRepository:
    """Reads branch tips and commit history for graph layout"""

    def __init__(self, repo_path: str | None = None) -> None:
        """Initialize repository"""
        if repo_path is None:
            repo_path = self._find_repo()

        self.repo = pygit2.Repository(repo_path)

    def _find_repo(self) -> str:
        """Find git repository in current directory or parents"""
        current = Path.cwd()
        while current != current.parent:
            if (current / ".git").exists():
                return str(current)
            current = current.parent
        raise ValueError("Not in a git repository")

    def get_heads(self, include_tags: bool = True, include_remotes: bool = False) -> list[Head]:
        """Get the named refs to lay out, each peeled to its commit"""
        heads: list[Head] = []

        for branch_name in self.repo.branches.local:
            branch = self.repo.branches.local[branch_name]
            commit = branch.peel(pygit2.Commit)
            heads.append(Head(branch_name, str(commit.id)))

        if include_remotes:
            for branch_name in self.repo.branches.remote:
                if branch_name.endswith("/HEAD"):
                    continue
                branch = self.repo.branches.remote[branch_name]
                commit = branch.peel(pygit2.Commit)
                heads.append(Head(branch_name, str(commit.id)))

        if include_tags:
            for ref_name in self.repo.references:
                if not ref_name.startswith(TAG_PREFIX):
                    continue
                try:
                    commit = self.repo.references[ref_name].peel(pygit2.Commit)
                except (ValueError, pygit2.GitError) as e:
                    # Tags on trees or blobs have no place in the graph
                    logger.debug("Skipping %s: %s", ref_name, e)
                    continue
                heads.append(Head(ref_name[len(TAG_PREFIX) :], str(commit.id)))

        return heads

    def iter_commits(self, heads: list[Head]) -> Iterator[Commit]:
        """Walk history from all heads together, newest first"""
        tips: list[pygit2.Oid] = []
        seen_tips: set[str] = set()
        for head in heads:
            if head.oid not in seen_tips:
                seen_tips.add(head.oid)
                tips.append(pygit2.Oid(hex=head.oid))

        if not tips:
            return

        walker = self.repo.walk(tips[0], pygit2.enums.SortMode.TIME)
        for tip in tips[1:]:
            walker.push(tip)

        for c in walker:
            full_message = c.message.strip()
            yield Commit(
                oid=str(c.id),
                parents=[str(p.id) for p in c.parents],
                committed_date=c.commit_time,
                summary=full_message.split("\n")[0][:60],
            )

    def iter_pages(self, heads: list[Head], page_size: int) -> Iterator[list[Commit]]:
        """Chunk the history walk into pages for incremental loading"""
        if page_size < 1:
            raise ValueError(f"Page size must be positive, got {page_size}")

        commits = self.iter_commits(heads)
        while page := list(islice(commits, page_size)):
            logger.debug("Read page of %d commits", len(page))
            yield page

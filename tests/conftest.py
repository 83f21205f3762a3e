"""Shared fixtures: scratch git repositories built with pygit2."""

import pygit2
import pytest


class RepoBuilder:
    """Creates commits with increasing timestamps in a scratch repository."""

    def __init__(self, path) -> None:
        self.repo = pygit2.init_repository(str(path), initial_head="main")
        self.tree = self.repo.TreeBuilder().write()
        self.clock = 1_700_000_000

    def commit(self, message: str, parents: list[pygit2.Oid]) -> pygit2.Oid:
        self.clock += 60
        sig = pygit2.Signature("Test", "test@example.com", self.clock, 0)
        return self.repo.create_commit(None, sig, sig, message, self.tree, parents)

    def branch(self, name: str, oid: pygit2.Oid) -> None:
        self.repo.branches.local.create(name, self.repo[oid])


@pytest.fixture
def merged_repo(tmp_path):
    """main: a <- b <- c <- m (merges d), topic: a <- d, tag v1 on b."""
    builder = RepoBuilder(tmp_path)
    a = builder.commit("Initial commit\n\nbody text", [])
    b = builder.commit("Second", [a])
    d = builder.commit("Topic work", [a])
    c = builder.commit("Third", [b])
    m = builder.commit("Merge topic", [c, d])
    builder.branch("main", m)
    builder.branch("topic", d)
    builder.repo.references.create("refs/tags/v1", b)
    oids = {"a": a, "b": b, "c": c, "d": d, "m": m}
    return tmp_path, {name: str(oid) for name, oid in oids.items()}

"""Tests for GitRepository against real repositories in temporary directories."""

import pytest
from git import Repo

from ginit.errors import VcsError, VcsFailure
from ginit.vcs.git_repository import GitRepository


@pytest.fixture(autouse=True)
def git_identity(monkeypatch):
    for prefix in ("GIT_AUTHOR", "GIT_COMMITTER"):
        monkeypatch.setenv(f"{prefix}_NAME", "Test")
        monkeypatch.setenv(f"{prefix}_EMAIL", "test@test.com")


@pytest.fixture
def workdir(tmp_path):
    path = tmp_path / "myrepo"
    path.mkdir()
    return path


@pytest.fixture
def bare_remote(tmp_path):
    path = tmp_path / "remote.git"
    Repo.init(str(path), bare=True)
    return path


@pytest.mark.unit
class TestInitRepo:

    def test_creates_git_metadata_on_master(self, workdir):
        GitRepository(str(workdir)).init_repo()

        repo = Repo(str(workdir))
        assert (workdir / ".git").is_dir()
        assert repo.head.ref.name == "master"

    def test_already_initialized_raises(self, workdir):
        git_repo = GitRepository(str(workdir))
        git_repo.init_repo()

        with pytest.raises(VcsError) as exc_info:
            git_repo.init_repo()

        assert exc_info.value.kind is VcsFailure.ALREADY_INITIALIZED


@pytest.mark.unit
class TestCommit:

    def test_commits_all_staged_files(self, workdir):
        (workdir / "app.js").write_text("console.log(1)\n")
        (workdir / "README.md").write_text("# myrepo")
        git_repo = GitRepository(str(workdir))
        git_repo.init_repo()

        git_repo.stage_all()
        sha = git_repo.commit("Initial commit")

        head = Repo(str(workdir)).head.commit
        assert head.hexsha == sha
        assert head.message == "Initial commit"
        assert sorted(b.path for b in head.tree.blobs) == ["README.md", "app.js"]

    def test_stage_path_stages_only_that_file(self, workdir):
        (workdir / ".gitignore").write_text("dist\n")
        (workdir / "app.js").write_text("")
        git_repo = GitRepository(str(workdir))
        git_repo.init_repo()

        git_repo.stage_path(".gitignore")
        git_repo.commit("Add ignore file")

        head = Repo(str(workdir)).head.commit
        assert [b.path for b in head.tree.blobs] == [".gitignore"]

    def test_nothing_staged_on_new_repository(self, workdir):
        git_repo = GitRepository(str(workdir))
        git_repo.init_repo()

        with pytest.raises(VcsError) as exc_info:
            git_repo.commit("Initial commit")

        assert exc_info.value.kind is VcsFailure.NOTHING_TO_COMMIT

    def test_nothing_new_since_head(self, workdir):
        (workdir / "app.js").write_text("")
        git_repo = GitRepository(str(workdir))
        git_repo.init_repo()
        git_repo.stage_all()
        git_repo.commit("Initial commit")

        git_repo.stage_all()
        with pytest.raises(VcsError) as exc_info:
            git_repo.commit("Again")

        assert exc_info.value.kind is VcsFailure.NOTHING_TO_COMMIT


@pytest.mark.unit
class TestRemoteAndPush:

    def test_add_remote_registers_url(self, workdir):
        git_repo = GitRepository(str(workdir))
        git_repo.init_repo()

        git_repo.add_remote("origin", "git@host:user/myrepo.git")

        assert Repo(str(workdir)).remote("origin").url == "git@host:user/myrepo.git"

    def test_push_uploads_master(self, workdir, bare_remote):
        (workdir / "app.js").write_text("")
        git_repo = GitRepository(str(workdir))
        git_repo.init_repo()
        git_repo.stage_all()
        sha = git_repo.commit("Initial commit")
        git_repo.add_remote("origin", str(bare_remote))

        git_repo.push("origin", "master")

        assert Repo(str(bare_remote)).heads["master"].commit.hexsha == sha

    def test_push_to_unreachable_remote_is_rejected(self, workdir, tmp_path):
        (workdir / "app.js").write_text("")
        git_repo = GitRepository(str(workdir))
        git_repo.init_repo()
        git_repo.stage_all()
        git_repo.commit("Initial commit")
        git_repo.add_remote("origin", str(tmp_path / "missing.git"))

        with pytest.raises(VcsError) as exc_info:
            git_repo.push("origin", "master")

        assert exc_info.value.kind is VcsFailure.PUSH_REJECTED

    def test_non_fast_forward_push_is_rejected(self, workdir, bare_remote, tmp_path):
        other = Repo.clone_from(str(bare_remote), str(tmp_path / "other"))
        (tmp_path / "other" / "other.txt").write_text("x")
        other.index.add(["other.txt"])
        other.index.commit("Other history")
        other.git.push("origin", "HEAD:master")

        (workdir / "app.js").write_text("")
        git_repo = GitRepository(str(workdir))
        git_repo.init_repo()
        git_repo.stage_all()
        git_repo.commit("Initial commit")
        git_repo.add_remote("origin", str(bare_remote))

        with pytest.raises(VcsError) as exc_info:
            git_repo.push("origin", "master")

        assert exc_info.value.kind is VcsFailure.PUSH_REJECTED


@pytest.mark.unit
class TestGitFailuresAreTyped:

    def test_init_over_invalid_gitfile_is_command_failed(self, workdir):
        (workdir / ".git").write_text("not a gitfile\n")

        with pytest.raises(VcsError) as exc_info:
            GitRepository(str(workdir)).init_repo()

        assert exc_info.value.kind is VcsFailure.COMMAND_FAILED
        assert "git init failed" in exc_info.value.message

    def test_stage_outside_a_repository_is_command_failed(self, workdir):
        (workdir / "app.js").write_text("")

        with pytest.raises(VcsError) as exc_info:
            GitRepository(str(workdir)).stage_all()

        assert exc_info.value.kind is VcsFailure.COMMAND_FAILED

    def test_commit_outside_a_repository_is_command_failed(self, workdir):
        with pytest.raises(VcsError) as exc_info:
            GitRepository(str(workdir)).commit("Initial commit")

        assert exc_info.value.kind is VcsFailure.COMMAND_FAILED

    def test_duplicate_remote_is_command_failed(self, workdir):
        git_repo = GitRepository(str(workdir))
        git_repo.init_repo()
        git_repo.add_remote("origin", "git@host:user/myrepo.git")

        with pytest.raises(VcsError) as exc_info:
            git_repo.add_remote("origin", "git@host:user/other.git")

        assert exc_info.value.kind is VcsFailure.COMMAND_FAILED

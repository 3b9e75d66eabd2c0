"""Tests for the skill catalog scanner."""
import pytest

from ccskill.core.errors import NotFoundError, SourceNotFoundError
from ccskill.core.paths import ScopePaths
from ccskill.core.scanner import scan
from ccskill.models.skill import LinkStatus, SkillScope


class TestScan:
    """Test scan()."""

    def test_lists_only_skill_directories(self, paths):
        """Test that hidden, cache and plain file entries are excluded."""
        # When: we scan the source root
        skills = scan(paths)

        # Then: only the three skill directories should be found, in order
        assert list(skills) == ["skill-a", "skill-b", "skill-c"]
        assert skills["skill-a"].path == paths.source_root / "skill-a"
        assert all(s.status == LinkStatus.UNLINKED for s in skills.values())

    def test_names_are_case_sensitive(self, paths):
        """Test that names match directory names exactly."""
        skills = scan(paths)

        assert "Skill-A" not in skills

    def test_global_symlink_is_linked(self, paths):
        """Test that a global symlink marks the skill linked-global."""
        # Given: skill-a linked globally
        paths.global_dir.mkdir(parents=True)
        (paths.global_dir / "skill-a").symlink_to(paths.source_root / "skill-a")

        # When: we scan
        skills = scan(paths)

        # Then: only skill-a should be linked
        assert skills["skill-a"].status == LinkStatus.LINKED_GLOBAL
        assert skills["skill-a"].scope == SkillScope.GLOBAL
        assert skills["skill-b"].installed is False

    def test_global_plain_directory_is_not_linked(self, paths):
        """Test that only symlinks count in global scope."""
        paths.global_dir.mkdir(parents=True)
        (paths.global_dir / "skill-a").mkdir()

        skills = scan(paths)

        assert skills["skill-a"].installed is False

    def test_local_plain_directory_is_linked(self, paths):
        """Test that a manually copied local directory counts as installed."""
        paths.local_dir.mkdir(parents=True)
        (paths.local_dir / "skill-b").mkdir()

        skills = scan(paths)

        assert skills["skill-b"].status == LinkStatus.LINKED_LOCAL

    def test_local_shadows_global(self, paths):
        """Test that a local link wins over a global link."""
        # Given: skill-c linked in both scopes
        for scope_dir in (paths.global_dir, paths.local_dir):
            scope_dir.mkdir(parents=True)
            (scope_dir / "skill-c").symlink_to(paths.source_root / "skill-c")

        # When: we scan
        skills = scan(paths)

        # Then: local should be authoritative
        assert skills["skill-c"].status == LinkStatus.LINKED_LOCAL
        assert skills["skill-c"].scope == SkillScope.LOCAL

    def test_missing_source_root(self, tmp_path):
        """Test that a missing source root raises NotFound."""
        paths = ScopePaths(
            source_root=tmp_path / "nope",
            global_dir=tmp_path / "g",
            local_dir=tmp_path / "l",
        )

        with pytest.raises(SourceNotFoundError) as exc_info:
            scan(paths)

        assert isinstance(exc_info.value, NotFoundError)
        assert "nope" in str(exc_info.value)

    def test_empty_source_root(self, tmp_path):
        """Test scanning a directory without skills."""
        (tmp_path / "empty").mkdir()
        paths = ScopePaths(
            source_root=tmp_path / "empty",
            global_dir=tmp_path / "g",
            local_dir=tmp_path / "l",
        )

        assert scan(paths) == {}

    def test_symlink_in_source_root_is_not_a_skill(self, paths, tmp_path):
        """Test that symlinked directories under the source root are skipped."""
        # Given: a link in the source root pointing at a directory elsewhere
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        (paths.source_root / "linked-skill").symlink_to(elsewhere, target_is_directory=True)

        # When: we scan
        skills = scan(paths)

        # Then: only real directories are skills
        assert "linked-skill" not in skills
        assert list(skills) == ["skill-a", "skill-b", "skill-c"]

"""
Tests for the tuning model and loader.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_modes.core import PitchClass, frequency, from_keynum
from chuk_mcp_modes.models import STANDARD_TUNING, Tuning
from chuk_mcp_modes.tunings import TuningLoader


class TestTuning:
    """Tests for the Tuning model."""

    def test_defaults(self) -> None:
        """A4 = 440 mirrored by default."""
        tuning = Tuning(name="test")
        assert tuning.reference_keynum == 69
        assert tuning.reference_frequency == 440
        assert tuning.mirror_below_reference is True

    def test_name_normalized(self) -> None:
        """Names are lowercased with hyphens."""
        assert Tuning(name="Concert_Exact").name == "concert-exact"

    def test_invalid_name(self) -> None:
        """Names must be identifiers."""
        with pytest.raises(ValidationError):
            Tuning(name="not a name")

    def test_invalid_reference(self) -> None:
        """Reference must be a real pitch with positive frequency."""
        with pytest.raises(ValidationError):
            Tuning(name="bad", reference_frequency=0)
        with pytest.raises(ValidationError):
            Tuning(name="bad", reference_keynum=128)

    def test_frozen(self) -> None:
        """Tunings can't be modified."""
        with pytest.raises(ValidationError):
            STANDARD_TUNING.reference_frequency = 432  # type: ignore[misc]

    def test_frequency_of(self) -> None:
        """Tunings convert pitches with their own reference."""
        a3 = PitchClass(9, 3)
        assert STANDARD_TUNING.frequency_of(a3) == 880
        exact = Tuning(name="exact", mirror_below_reference=False)
        assert exact.frequency_of(a3) == 220
        baroque = Tuning(name="baroque", reference_frequency=415)
        assert baroque.frequency_of(PitchClass(9, 5)) == 830


    def test_standard_matches_frequency_defaults(self) -> None:
        """The standard tuning is frequency() with its default keywords."""
        for value in range(0, 128):
            pc = from_keynum(value)
            assert STANDARD_TUNING.frequency_of(pc) == frequency(pc)


class TestTuningLoader:
    """Tests for TuningLoader."""

    def test_list_library(self) -> None:
        """Built-in tunings are discovered."""
        loader = TuningLoader()
        names = [t.name for t in loader.list_tunings()]
        assert names == ["baroque", "concert-exact", "standard"]

    def test_get_tuning(self) -> None:
        """Load a tuning by name."""
        loader = TuningLoader()
        tuning = loader.get_tuning("standard")
        assert tuning is not None
        assert tuning == STANDARD_TUNING

    def test_get_exact(self) -> None:
        """concert-exact decays below A4."""
        tuning = TuningLoader().get_tuning("concert-exact")
        assert tuning is not None
        assert tuning.mirror_below_reference is False

    def test_get_missing(self) -> None:
        """Unknown tunings return None."""
        assert TuningLoader().get_tuning("nonexistent") is None

    def test_project_overrides_library(self, temp_dir: Path) -> None:
        """Project tunings take precedence."""
        (temp_dir / "standard.yaml").write_text(
            "name: standard\nreference:\n  keynum: 69\n  frequency: 432\n"
        )
        loader = TuningLoader(project_path=temp_dir)
        tuning = loader.get_tuning("standard")
        assert tuning is not None
        assert tuning.reference_frequency == 432

        listed = {t.name: t for t in loader.list_tunings()}
        assert listed["standard"].reference_frequency == 432
        assert "baroque" in listed

    def test_name_defaults_to_file_stem(self, temp_dir: Path) -> None:
        """Files without a name use their file name."""
        (temp_dir / "scientific.yaml").write_text(
            "reference:\n  keynum: 60\n  frequency: 256\n"
        )
        loader = TuningLoader(library_path=temp_dir)
        tuning = loader.get_tuning("scientific")
        assert tuning is not None
        assert tuning.name == "scientific"
        assert tuning.frequency_of(PitchClass(0, 4)) == 256

    def test_every_listed_name_resolves(self, temp_dir: Path) -> None:
        """Anything list_tunings reports can be fetched by that name."""
        (temp_dir / "my_tuning.yaml").write_text("reference:\n  frequency: 442\n")
        (temp_dir / "a432.yaml").write_text("name: verdi\nreference:\n  frequency: 432\n")
        loader = TuningLoader(project_path=temp_dir)

        names = [t.name for t in loader.list_tunings()]
        assert names == ["baroque", "concert-exact", "my-tuning", "standard", "verdi"]
        for name in names:
            tuning = loader.get_tuning(name)
            assert tuning is not None
            assert tuning.name == name
        assert loader.get_tuning("verdi").reference_frequency == 432  # type: ignore[union-attr]
        assert loader.get_tuning("a432") is None

    def test_lookup_normalizes_name(self, temp_dir: Path) -> None:
        """Requested names are normalized like Tuning names."""
        (temp_dir / "my_tuning.yaml").write_text("reference:\n  frequency: 442\n")
        loader = TuningLoader(library_path=temp_dir)
        for name in ["my-tuning", "my_tuning", "My_Tuning", " MY-TUNING "]:
            assert loader.get_tuning(name).reference_frequency == 442  # type: ignore[union-attr]

    def test_project_name_overrides_library_stem(self, temp_dir: Path) -> None:
        """A project file naming a library tuning overrides it whatever its file name."""
        (temp_dir / "tuned_down.yaml").write_text("name: standard\nreference:\n  frequency: 432\n")
        loader = TuningLoader(project_path=temp_dir)
        listed = {t.name: t for t in loader.list_tunings()}
        assert listed["standard"].reference_frequency == 432
        assert loader.get_tuning("standard").reference_frequency == 432  # type: ignore[union-attr]

    def test_skips_broken_files(self, temp_dir: Path) -> None:
        """Unparsable files are skipped."""
        (temp_dir / "broken.yaml").write_text("name: [unclosed\n")
        (temp_dir / "invalid.yaml").write_text("name: invalid\nreference:\n  frequency: -5\n")
        loader = TuningLoader(library_path=temp_dir)
        assert loader.list_tunings() == []
        assert loader.get_tuning("broken") is None
        assert loader.get_tuning("invalid") is None

    def test_cache(self, temp_dir: Path) -> None:
        """Tunings are cached until cleared."""
        path = temp_dir / "custom.yaml"
        path.write_text("name: custom\nreference:\n  frequency: 430\n")
        loader = TuningLoader(library_path=temp_dir)
        assert loader.get_tuning("custom").reference_frequency == 430  # type: ignore[union-attr]

        path.write_text("name: custom\nreference:\n  frequency: 435\n")
        assert loader.get_tuning("custom").reference_frequency == 430  # type: ignore[union-attr]

        loader.clear_cache()
        assert loader.get_tuning("custom").reference_frequency == 435  # type: ignore[union-attr]

"""Unit tests for BindingGenerator use case."""

from pathlib import Path

import pytest
import yaml

from electron_installer.domain.binding import ElectronBinary
from electron_installer.domain.exceptions import BindingFileError
from electron_installer.usecases.binding_generator import BINDING_HEADER, BindingGenerator

BINARY = ElectronBinary(bin="/x/y/electron", dir="/x/y", version="1.6.2")


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.BindingGenerator")
class TestBindingGenerator:
    """Test binding file generation."""

    def test_render_is_valid_yaml(self):
        """Test the rendered file parses back to the binding mapping."""
        assert yaml.safe_load(BindingGenerator().render(BINARY)) == BINARY.to_dict()

    def test_render_starts_with_header(self):
        """Test the fixed header comment."""
        assert BindingGenerator().render(BINARY).startswith(BINDING_HEADER)

    def test_render_uses_block_style_sorted_keys(self):
        """Test block style and key order."""
        body = BindingGenerator().render(BINARY)[len(BINDING_HEADER):]
        assert body == "bin: /x/y/electron\ndir: /x/y\nversion: 1.6.2\n"

    def test_render_is_deterministic(self):
        """Test that identical input gives byte-identical output."""
        generator = BindingGenerator()
        assert generator.render(BINARY) == generator.render(ElectronBinary(**BINARY.to_dict()))

    def test_write_creates_parent(self, tmp_path: Path):
        """Test that write creates missing directories."""
        path = tmp_path / "vendor" / "electron-installer" / "electron-binary.yaml"
        assert BindingGenerator().write(path, BINARY) == path
        assert path.read_text(encoding="utf-8") == BindingGenerator().render(BINARY)

    def test_write_overwrites_and_leaves_no_temporary(self, tmp_path: Path):
        """Test that an existing binding is replaced in place."""
        path = tmp_path / "electron-binary.yaml"
        path.write_text("old", encoding="utf-8")

        BindingGenerator().write(path, BINARY)

        assert [p.name for p in tmp_path.iterdir()] == ["electron-binary.yaml"]
        assert ElectronBinary.load(path) == BINARY

    def test_write_failure(self, tmp_path: Path):
        """Test that an unwritable location raises BindingFileError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file")
        with pytest.raises(BindingFileError, match="Can not write binding file"):
            BindingGenerator().write(blocker / "electron-binary.yaml", BINARY)

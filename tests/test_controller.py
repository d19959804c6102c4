"""
Integration tests for the pack / unpack pipelines.

Test Coverage:
- pack_sprite_sheet(): output name, size, collision numbering, no stray files
- unpack_sprite_sheet(): frame names, count, pixel content
- create_sprite_sheet() / separate_sprite_sheet(): boolean outcomes, lock failure
"""

import logging

import numpy as np
import portalocker
import pytest
from PIL import Image

from spritesheet_toolkit.config import PackConfig, UnpackConfig
from spritesheet_toolkit.controller import (
    create_sprite_sheet,
    pack_sprite_sheet,
    separate_sprite_sheet,
    unpack_sprite_sheet,
)
from spritesheet_toolkit.core.errors import DecodeError
from spritesheet_toolkit.core.models import GridShape


class TestPack:

    def test_pack_when_grid_given_then_named_with_size_and_count(self, image_files, tmp_path):
        # Arrange
        config = PackConfig(
            image_paths=image_files,
            output_dir=tmp_path / "sheets",
            file_name="walk",
            grid=GridShape(3, 2),
        )

        # Act
        path = pack_sprite_sheet(config)

        # Assert
        assert path.name == "walk (8x8x6).png"
        with Image.open(path) as sheet:
            assert sheet.size == (24, 16)

    def test_pack_when_name_taken_then_numbers_sequentially(self, image_files, tmp_path):
        config = PackConfig(image_paths=image_files, output_dir=tmp_path / "sheets", file_name="walk")

        names = [pack_sprite_sheet(config).name for _ in range(3)]

        assert names == ["walk (8x8x6).png", "walk(1) (8x8x6).png", "walk(2) (8x8x6).png"]

    def test_pack_when_no_grid_then_solved(self, image_files, tmp_path):
        config = PackConfig(image_paths=image_files, output_dir=tmp_path, file_name="auto")

        path = pack_sprite_sheet(config)

        # solve(6, 8, 8) -> 2x3
        with Image.open(path) as sheet:
            assert sheet.size == (16, 24)

    def test_pack_reports_progress_per_tile(self, image_files, tmp_path):
        calls = []
        config = PackConfig(image_paths=image_files, output_dir=tmp_path, file_name="p", grid=GridShape(6, 1))

        pack_sprite_sheet(config, progress=lambda: calls.append(1))

        assert len(calls) == 6

    def test_pack_leaves_only_the_sheet_in_output_directory(self, tmp_path):
        src = tmp_path / "in.png"
        Image.new("RGBA", (2, 2), (5, 6, 7, 255)).save(src)
        out = tmp_path / "out"

        pack_sprite_sheet(PackConfig(image_paths=[src], output_dir=out, file_name="x", grid=GridShape(1, 1)))

        assert [p.name for p in out.iterdir()] == ["x (2x2x1).png"]

    def test_pack_when_input_unreadable_then_raises_and_writes_nothing(self, image_files, tmp_path):
        bad = tmp_path / "bad.png"
        bad.write_bytes(b"nope")
        out = tmp_path / "sheets"
        config = PackConfig(image_paths=[image_files[0], bad], output_dir=out, file_name="walk")

        with pytest.raises(DecodeError):
            pack_sprite_sheet(config)

        assert not out.exists()


class TestUnpack:

    def test_unpack_writes_numbered_frames_in_order(self, image_files, tmp_path):
        # Arrange
        sheet_path = pack_sprite_sheet(
            PackConfig(image_paths=image_files, output_dir=tmp_path / "sheets", file_name="walk", grid=GridShape(3, 2))
        )
        config = UnpackConfig(
            sheet_path=sheet_path,
            grid=GridShape(3, 2),
            output_dir=tmp_path / "frames",
            file_name="frame",
        )

        # Act
        paths = unpack_sprite_sheet(config)

        # Assert
        assert [p.name for p in paths] == [f"frame({i:04d}).png" for i in range(1, 7)]
        for original_path, frame_path in zip(image_files, paths):
            with Image.open(original_path) as original, Image.open(frame_path) as frame:
                assert np.array_equal(np.array(original.convert("RGBA")), np.array(frame.convert("RGBA")))

    def test_unpack_overwrites_existing_frames(self, tmp_path):
        sheet_path = tmp_path / "sheet.png"
        Image.new("RGBA", (4, 2), (9, 9, 9, 255)).save(sheet_path)
        out = tmp_path / "frames"
        out.mkdir()
        (out / "f(0001).png").write_bytes(b"old")

        paths = unpack_sprite_sheet(
            UnpackConfig(sheet_path=sheet_path, grid=GridShape(2, 1), output_dir=out, file_name="f", write_workers=0)
        )

        assert len(paths) == 2
        with Image.open(paths[0]) as frame:
            assert frame.size == (2, 2)


class TestBooleanEntryPoints:

    def test_create_sprite_sheet_when_ok_then_true(self, image_files, tmp_path):
        ok = create_sprite_sheet(image_files, (3, 2), "White", "Transparent", "walk", tmp_path / "out", "Png")

        assert ok is True
        assert (tmp_path / "out" / "walk (8x8x6).png").exists()

    def test_create_sprite_sheet_when_unknown_format_then_bmp(self, image_files, tmp_path):
        ok = create_sprite_sheet(image_files, None, "Transparent", "Transparent", "walk", tmp_path, "webp")

        assert ok is True
        assert (tmp_path / "walk (8x8x6).bmp").exists()

    def test_create_sprite_sheet_when_input_missing_then_false(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            ok = create_sprite_sheet([tmp_path / "missing.png"], (1, 1), "Transparent", "Transparent", "x", tmp_path, "Png")

        assert ok is False
        assert "Failed to create sprite sheet" in caplog.text

    def test_create_sprite_sheet_when_encode_fails_then_false_and_no_file(self, image_files, tmp_path):
        out = tmp_path / "out"

        ok = create_sprite_sheet(image_files, (3, 2), "Transparent", "Transparent", "walk", out, "Wmf")

        assert ok is False
        assert not list(out.glob("*.wmf"))

    def test_create_sprite_sheet_when_lock_unavailable_then_false(self, image_files, tmp_path, monkeypatch):
        def fail_lock(*args, **kwargs):
            raise portalocker.exceptions.LockException("locking not supported")

        monkeypatch.setattr(portalocker, "lock", fail_lock)

        ok = create_sprite_sheet(image_files[:1], (1, 1), "Transparent", "Transparent", "x", tmp_path / "out", "Png")

        assert ok is False
        assert list((tmp_path / "out").iterdir()) == []

    def test_create_sprite_sheet_when_bad_grid_then_false(self, image_files, tmp_path):
        assert create_sprite_sheet(image_files, (0, 2), "Transparent", "Transparent", "w", tmp_path, "Png") is False

    def test_separate_sprite_sheet_when_ok_then_true(self, tmp_path):
        sheet_path = tmp_path / "sheet.png"
        Image.new("RGBA", (100, 100)).save(sheet_path)
        calls = []

        ok = separate_sprite_sheet(sheet_path, (3, 3), "tile", tmp_path / "tiles", "Png", progress=lambda: calls.append(1))

        assert ok is True
        assert len(calls) == 9
        with Image.open(tmp_path / "tiles" / "tile(0009).png") as tile:
            assert tile.size == (33, 33)

    def test_separate_sprite_sheet_when_sheet_missing_then_false(self, tmp_path):
        assert separate_sprite_sheet(tmp_path / "nope.png", (2, 2), "t", tmp_path / "tiles", "Png") is False

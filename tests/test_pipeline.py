"""
Tests for the pipeline and command line entry point.
"""
import csv
import json
import shutil
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from courtlines.pipeline import Pipeline
import main

from conftest import COURT_W, COURT_H, COURT_THRESHOLD


@pytest.fixture
def pipeline(temp_output_dir):
    return Pipeline(output_dir=str(temp_output_dir), width=COURT_W,
                    height=COURT_H, threshold=COURT_THRESHOLD,
                    show_progress=False)


class TestPipeline:
    """Tests for Pipeline."""

    def test_load_binarizes(self, pipeline, court_raw_file, court_image):
        grid = pipeline.load(str(court_raw_file))
        assert grid.active_count == int((court_image > 0).sum())

    def test_process_writes_results(self, pipeline, court_raw_file,
                                    temp_output_dir):
        result = pipeline.process(str(court_raw_file))
        assert result.found

        with open(temp_output_dir / "court_lines.csv", newline="") as f:
            rows = list(csv.reader(f))
        assert len(rows) == 1 + 7

        data = json.loads((temp_output_dir / "court_lines.json").read_text())
        assert data["source"] == str(court_raw_file)
        assert data["counts"]["SINGLES_SIDELINE"] == 2

    def test_output_name(self, pipeline, court_raw_file, temp_output_dir):
        pipeline.process(str(court_raw_file), output_name="frame_01")
        assert (temp_output_dir / "frame_01_lines.csv").exists()

    def test_no_exports(self, court_raw_file, temp_output_dir):
        pipeline = Pipeline(output_dir=str(temp_output_dir), width=COURT_W,
                            height=COURT_H, threshold=COURT_THRESHOLD,
                            save_csv=False, save_json=False,
                            show_progress=False)
        pipeline.process(str(court_raw_file))
        assert list(temp_output_dir.iterdir()) == []

    def test_debug_images(self, court_raw_file, temp_output_dir):
        pipeline = Pipeline(output_dir=str(temp_output_dir), width=COURT_W,
                            height=COURT_H, threshold=COURT_THRESHOLD,
                            save_debug=True, show_progress=False)
        pipeline.process(str(court_raw_file))
        for suffix in ("hough_transform", "hough_lines", "classified"):
            assert (temp_output_dir / f"court_{suffix}.png").exists()

    def test_process_many(self, court_raw_file, temp_output_dir):
        second = temp_output_dir / "court_copy.raw"
        shutil.copy(court_raw_file, second)
        out = temp_output_dir / "out"
        pipeline = Pipeline(output_dir=str(out), width=COURT_W,
                            height=COURT_H, threshold=COURT_THRESHOLD,
                            show_progress=True)
        paths = [str(court_raw_file), str(second)]
        results = pipeline.process_many(paths)
        assert list(results) == paths
        assert all(r.found for r in results.values())
        assert (out / "court_copy_lines.csv").exists()

    def test_missing_input(self, pipeline, temp_output_dir):
        with pytest.raises(IOError):
            pipeline.process(str(temp_output_dir / "nothing.raw"))

    def test_render(self, pipeline, court_raw_file):
        grid = pipeline.load(str(court_raw_file))
        result = pipeline.process(str(court_raw_file))
        assert pipeline.render(grid, result).shape == (COURT_H, COURT_W, 3)


class TestCli:
    """Tests for the command line entry point."""

    def test_parse_defaults(self):
        args = main.parse_args(["-i", "a.raw"])
        assert args.input == ["a.raw"]
        assert args.width == 1392
        assert args.height == 550
        assert args.threshold == 200
        assert args.binarize == 150
        assert not args.debug

    def test_parse_options(self):
        args = main.parse_args(["-i", "a.raw", "b.raw", "-t", "120",
                                "--width", "640", "-b", "-1", "-q"])
        assert args.input == ["a.raw", "b.raw"]
        assert args.threshold == 120.0
        assert args.width == 640
        assert args.binarize == -1
        assert args.quiet

    def test_missing_input_exits(self, temp_output_dir):
        with pytest.raises(SystemExit) as exc:
            main.main(["-i", str(temp_output_dir / "missing.raw")])
        assert exc.value.code == 1

    def test_invalid_size_exits(self, court_raw_file):
        with pytest.raises(SystemExit) as exc:
            main.main(["-i", str(court_raw_file), "--width", "0"])
        assert exc.value.code == 1

    def test_processing_error_exits(self, court_raw_file, temp_output_dir):
        # The file is too short for the default frame size
        with pytest.raises(SystemExit) as exc:
            main.main(["-i", str(court_raw_file), "-o", str(temp_output_dir),
                       "-q"])
        assert exc.value.code == 1

    def test_run(self, court_raw_file, temp_output_dir, capsys):
        main.main(["-i", str(court_raw_file), "-o", str(temp_output_dir),
                   "--width", str(COURT_W), "--height", str(COURT_H),
                   "-t", str(COURT_THRESHOLD), "-q"])
        out = capsys.readouterr().out
        assert "7 court lines" in out
        assert "DOUBLES_SIDELINE" in out
        assert (temp_output_dir / "court_lines.csv").exists()

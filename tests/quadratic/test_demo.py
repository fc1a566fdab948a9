"""
Tests for the demonstration program.
"""

import pytest

from quadfit.demo import main


class TestDemo:

    def test_prints_points_and_coefficients(self, capsys):
        assert main(["--points", "8", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert out.count("Point ") == 8
        assert "a = 1.23" in out
        assert "b = -9.87" in out
        assert "c = 0.01" in out

    def test_float32(self, capsys):
        assert main(["--dtype", "float32", "-n", "5"]) == 0
        assert "a = " in capsys.readouterr().out

    def test_negative_points(self, capsys):
        assert main(["--points", "-1"]) == 1
        assert "ERROR" in capsys.readouterr().out

    def test_too_few_points_is_not_an_error(self, capsys):
        assert main(["--points", "0"]) == 0
        assert "a = nan" in capsys.readouterr().out

    def test_bad_dtype_exits(self):
        with pytest.raises(SystemExit):
            main(["--dtype", "float16"])

"""Tests for IMT calculation, classification and work-calorie estimation."""

from __future__ import annotations

import pytest

from kalkulator_imt.modules.calc_utils import (
    durasi_kurang,
    format_imt,
    format_rentang_kalori,
    get_workload,
    hitung_imt,
    hitung_kalori_kerja,
    kategori_imt,
    klasifikasi_imt,
    parse_angka,
)


class TestParseAngka:
    """Tests for lenient form-number parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [("65", 65.0), (" 170 ", 170.0), ("65,5", 65.5), (70, 70.0), (4.5, 4.5)],
    )
    def test_numeric_inputs(self, value, expected) -> None:
        assert parse_angka(value) == expected

    @pytest.mark.parametrize(
        "value", [None, "", "   ", "abc", "nan", "inf", float("nan"), True]
    )
    def test_invalid_inputs_give_none(self, value) -> None:
        assert parse_angka(value) is None


class TestHitungImt:
    """Tests for the IMT formula."""

    @pytest.mark.parametrize(
        "weight, height, expected",
        [
            ("65", "170", 22.5),
            ("50", "160", 19.5),
            ("45", "170", 15.6),
            ("80", "165", 29.4),
            (70, 175, 22.9),
            (100, 200, 25.0),
        ],
    )
    def test_known_values(self, weight, height, expected) -> None:
        assert hitung_imt(weight, height) == expected

    def test_rounds_half_away_from_zero(self) -> None:
        # 22.45 / 1.0^2 tepat di tengah; round() bawaan memberi 22.4
        assert hitung_imt(22.45, 100) == 22.5

    def test_decimal_comma(self) -> None:
        assert hitung_imt("65,5", "170") == 22.7

    @pytest.mark.parametrize("weight", ["65", "0", "-10"])
    def test_zero_height_is_undefined(self, weight) -> None:
        assert hitung_imt(weight, "0") is None

    def test_tiny_height_is_undefined(self) -> None:
        # (1e-202)^2 menjadi 0.0
        assert hitung_imt("65", "1e-200") is None

    def test_overflowing_result_is_undefined(self) -> None:
        assert hitung_imt("1e308", "1") is None

    @pytest.mark.parametrize(
        "weight, height",
        [("abc", "170"), ("65", "abc"), ("", "170"), ("65", ""), (None, None)],
    )
    def test_non_numeric_is_undefined(self, weight, height) -> None:
        assert hitung_imt(weight, height) is None


class TestKlasifikasiImt:
    """Tests for the Indonesian IMT category thresholds."""

    @pytest.mark.parametrize(
        "bmi, expected",
        [
            (None, "Unknown"),
            (15.6, "Kurus"),
            (18.4, "Kurus"),
            (18.5, "Normal"),
            (22.5, "Normal"),
            (25.0, "Normal"),
            (25.01, "Overweight"),
            (25.1, "Overweight"),
            (27.0, "Overweight"),
            (27.01, "Obesitas"),
            (40.0, "Obesitas"),
        ],
    )
    def test_boundaries(self, bmi, expected) -> None:
        assert kategori_imt(bmi) == expected

    def test_unknown_category_prompts_for_data(self) -> None:
        info = klasifikasi_imt(None)
        assert info.key == "Unknown"
        assert info.label == "-"
        assert info.description == "Masukkan data untuk melihat hasil."

    def test_category_carries_description(self) -> None:
        info = klasifikasi_imt(29.4)
        assert info.label == "Obesitas"
        assert "ahli gizi" in info.description


class TestHitungKaloriKerja:
    """Tests for the work-calorie range estimation."""

    @pytest.mark.parametrize(
        "workload, duration, expected",
        [
            ("Ringan", "4", (400.0, 800.0)),
            ("Sedang", "8", (1600.0, 2800.0)),
            ("Berat", "8", (2800.0, 4000.0)),
            ("Berat", "4.5", (1575.0, 2250.0)),
            ("Sedang", "4", (800.0, 1400.0)),
        ],
    )
    def test_range_is_rate_times_duration(self, workload, duration, expected) -> None:
        assert hitung_kalori_kerja(workload, duration) == expected

    def test_overflowing_range_is_undefined(self) -> None:
        assert hitung_kalori_kerja("Berat", "1e308") is None

    def test_workload_key_is_case_insensitive(self) -> None:
        assert hitung_kalori_kerja("sedang", 8) == (1600.0, 2800.0)

    @pytest.mark.parametrize(
        "workload, duration",
        [
            ("None", "8"),
            (None, "8"),
            ("Sangat Berat", "8"),
            ("Sedang", "3.9"),
            ("Sedang", "0"),
            ("Sedang", "abc"),
            ("Sedang", ""),
        ],
    )
    def test_undefined_range(self, workload, duration) -> None:
        assert hitung_kalori_kerja(workload, duration) is None

    def test_unknown_workload_falls_back_to_none(self) -> None:
        assert get_workload("lembur").key == "None"
        assert get_workload(" berat ").label == "Beban Kerja Berat (III)"

    def test_short_duration_is_advisory_only(self) -> None:
        assert durasi_kurang("3") is True
        assert durasi_kurang("4") is False
        assert durasi_kurang("abc") is False


class TestFormatting:
    """Tests for the display placeholders."""

    def test_imt_placeholder(self) -> None:
        assert format_imt(None) == "--.-"
        assert format_imt(22.5) == "22.5"
        assert format_imt(25.0) == "25.0"

    def test_calorie_placeholder(self) -> None:
        assert format_rentang_kalori(None) == "-- - --"
        assert format_rentang_kalori((1600.0, 2800.0)) == "1600 - 2800"
        assert format_rentang_kalori((1650.5, 2887.5)) == "1650.5 - 2887.5"


def test_recomputation_is_idempotent() -> None:
    first = (hitung_imt("65", "170"), hitung_kalori_kerja("Sedang", "8"))
    second = (hitung_imt("65", "170"), hitung_kalori_kerja("Sedang", "8"))
    assert first == second

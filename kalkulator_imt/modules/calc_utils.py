from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional, Tuple

from .reference import (
    CATEGORIES,
    CategoryInfo,
    IMT_PLACEHOLDER,
    KALORI_PLACEHOLDER,
    MIN_DURATION_HOURS,
    WORKLOADS,
    WorkloadInfo,
)

# ==============================================================================
# MODUL PERHITUNGAN IMT & KALORI KERJA
# Referensi: Klasifikasi IMT Kemenkes RI, Tabel Beban Kerja SNI
# ==============================================================================

CalorieRange = Tuple[float, float]


def parse_angka(value: Any) -> Optional[float]:
    """
    Mengubah input form (teks/angka) menjadi float.
    Koma desimal ("65,5") diterima. Input kosong, non-numerik, NaN, atau
    tak hingga menghasilkan None (bukan exception).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        num = float(value)
    else:
        txt = str(value).strip().replace(",", ".")
        if not txt:
            return None
        try:
            num = float(txt)
        except ValueError:
            return None
    if not math.isfinite(num):
        return None
    return num


def round_half_up(value: float, digits: int = 1) -> float:
    # Pembulatan setengah menjauhi nol (22.45 -> 22.5)
    quant = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quant, rounding=ROUND_HALF_UP))


def hitung_imt(weight: Any, height: Any) -> Optional[float]:
    """
    Menghitung Indeks Massa Tubuh (IMT).

    Rumus: IMT = BB (kg) / TB (m)^2, dibulatkan 1 angka desimal.
    Tinggi dimasukkan dalam cm. Hasil None jika input tidak valid
    atau tinggi bernilai nol.
    """
    w = parse_angka(weight)
    h_cm = parse_angka(height)
    if w is None or h_cm is None or h_cm == 0:
        return None

    h_m = h_cm / 100.0
    h_sq = h_m * h_m
    # Tinggi sangat kecil bisa menjadi 0.0 setelah dikuadratkan
    if h_sq == 0:
        return None
    bmi = w / h_sq
    if not math.isfinite(bmi):
        return None
    return round_half_up(bmi, 1)


def kategori_imt(bmi: Optional[float]) -> str:
    """
    Klasifikasi IMT Indonesia:
      - Kurus: < 18.5
      - Normal: 18.5 - 25.0
      - Overweight: 25.1 - 27.0
      - Obesitas: > 27.0
    """
    if bmi is None:
        return "Unknown"
    if bmi < 18.5:
        return "Kurus"
    if bmi <= 25.0:
        return "Normal"
    if bmi <= 27.0:
        return "Overweight"
    return "Obesitas"


def klasifikasi_imt(bmi: Optional[float]) -> CategoryInfo:
    """Kategori IMT lengkap dengan label dan deskripsi tampilan."""
    return CATEGORIES[kategori_imt(bmi)]


def get_workload(workload: Any) -> WorkloadInfo:
    # "sedang" / " Sedang " -> "Sedang"; selain itu dianggap belum dipilih
    key = str(workload or "None").strip().capitalize()
    return WORKLOADS.get(key, WORKLOADS["None"])


def hitung_kalori_kerja(workload: Any, duration: Any) -> Optional[CalorieRange]:
    """
    Estimasi kebutuhan kalori kerja per hari.

    Rumus: (kkal/jam minimal x durasi, kkal/jam maksimal x durasi).
    Hasil None jika beban kerja belum dipilih, durasi bukan angka,
    atau durasi < 4 jam.
    """
    info = get_workload(workload)
    d = parse_angka(duration)
    if info.key == "None" or d is None or d < MIN_DURATION_HOURS:
        return None
    lo, hi = info.min * d, info.max * d
    if not (math.isfinite(lo) and math.isfinite(hi)):
        return None
    return (lo, hi)


def durasi_kurang(duration: Any) -> bool:
    """True jika durasi berupa angka tetapi di bawah batas minimal (validasi lunak)."""
    d = parse_angka(duration)
    return d is not None and d < MIN_DURATION_HOURS


def format_angka(value: float) -> str:
    # 1600.0 -> "1600", 1650.5 -> "1650.5"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_imt(bmi: Optional[float]) -> str:
    return IMT_PLACEHOLDER if bmi is None else f"{bmi:.1f}"


def format_rentang_kalori(cal_range: Optional[CalorieRange]) -> str:
    if cal_range is None:
        return KALORI_PLACEHOLDER
    lo, hi = cal_range
    return f"{format_angka(lo)} - {format_angka(hi)}"

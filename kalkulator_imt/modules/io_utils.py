from __future__ import annotations
from pathlib import Path
from typing import Tuple, List, Dict
import pandas as pd

from .calc_utils import hitung_imt, hitung_kalori_kerja, kategori_imt, parse_angka
from .planner import rekomendasi_menu
from .reference import MIN_DURATION_HOURS

# ==============================================================================
# MODUL INPUT/OUTPUT DATA BATCH (CSV/XLSX)
# Menghitung IMT & kalori kerja untuk banyak pekerja sekaligus.
# ==============================================================================

REQUIRED_COLUMNS = ["BERAT", "TINGGI"]
OUTPUT_COLUMNS = ["IMT", "KATEGORI", "KALORI_MIN", "KALORI_MAX", "MENU_KKAL"]


def _standard_column(col: str) -> str | None:
    c_up = str(col).upper().strip()
    if "BERAT" in c_up and "BEBAN" not in c_up or "WEIGHT" in c_up or c_up == "BB": return "BERAT"
    if "TINGGI" in c_up or "HEIGHT" in c_up or c_up == "TB": return "TINGGI"
    if "BEBAN" in c_up or "WORKLOAD" in c_up: return "BEBAN"
    if "DURASI" in c_up or "JAM" in c_up or "DURATION" in c_up: return "DURASI"
    if "NAMA" in c_up or "NAME" in c_up: return "NAMA"
    return None


def standardize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Menyeragamkan nama kolom agar file dari berbagai sumber bisa dibaca.
    Contoh: 'Berat Badan (kg)' -> BERAT, 'Tinggi (cm)' -> TINGGI,
    'Beban Kerja' -> BEBAN, 'Durasi Kerja (jam)' -> DURASI.
    """
    new_columns: Dict[str, str] = {}
    for col in df.columns:
        std = _standard_column(col)
        # Kolom pertama yang cocok yang dipakai
        if std and std not in new_columns.values():
            new_columns[col] = std
    return df.rename(columns=new_columns)


def load_batch(path: str | Path) -> Tuple[pd.DataFrame | None, List[str]]:
    """
    Memuat data pekerja dari CSV/XLSX dan menstandarisasi kolom.
    Mengembalikan (df, errors); df None jika file tidak bisa dipakai.
    """
    path = Path(path)
    if not path.exists():
        return None, [f"File data tidak ditemukan: {path}"]
    if path.suffix.lower() == ".xls":
        return None, ["Format .xls tidak didukung, simpan sebagai .xlsx atau .csv"]

    try:
        if path.suffix.lower() == ".xlsx":
            df = pd.read_excel(path)
        else:
            df = pd.read_csv(path, dtype=str)
    except Exception as e:
        return None, [f"Gagal membaca data: {e}"]

    df = standardize_columns(df)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        return None, [f"Kolom wajib tidak ada: {', '.join(missing)}"]

    if "BEBAN" not in df.columns:
        df["BEBAN"] = "None"
    if "DURASI" not in df.columns:
        df["DURASI"] = str(MIN_DURATION_HOURS)
    return df, []


def _derive_row(row: pd.Series) -> pd.Series:
    bmi = hitung_imt(row.get("BERAT"), row.get("TINGGI"))
    beban = row.get("BEBAN")
    cal_range = hitung_kalori_kerja(None if pd.isna(beban) else beban, row.get("DURASI"))
    menu = rekomendasi_menu(cal_range)
    return pd.Series({
        "IMT": bmi,
        "KATEGORI": kategori_imt(bmi),
        "KALORI_MIN": cal_range[0] if cal_range else None,
        "KALORI_MAX": cal_range[1] if cal_range else None,
        "MENU_KKAL": menu.calories if menu else None,
    })


def derive_batch(df: pd.DataFrame) -> pd.DataFrame:
    """Menambahkan kolom hasil (IMT, KATEGORI, KALORI_MIN/MAX, MENU_KKAL) per baris."""
    out = df.copy()
    if out.empty:
        for c in OUTPUT_COLUMNS:
            out[c] = pd.Series(dtype=object)
        return out

    derived = out.apply(_derive_row, axis=1)
    for c in OUTPUT_COLUMNS:
        out[c] = derived[c]
    return out


def summarize_categories(df: pd.DataFrame) -> pd.Series:
    """Jumlah pekerja per kategori IMT (urutan Kurus -> Obesitas -> Unknown)."""
    order = ["Kurus", "Normal", "Overweight", "Obesitas", "Unknown"]
    return df["KATEGORI"].value_counts().reindex(order, fill_value=0)


def count_invalid_rows(df: pd.DataFrame) -> int:
    # Baris dengan berat/tinggi yang tidak bisa dihitung
    return int(sum(
        hitung_imt(w, h) is None for w, h in zip(df["BERAT"], df["TINGGI"])
    ))

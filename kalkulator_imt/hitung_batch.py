import argparse
import sys
from pathlib import Path

from kalkulator_imt.modules.io_utils import (
    count_invalid_rows, derive_batch, load_batch, summarize_categories,
)


# --- HITUNG IMT & KALORI KERJA UNTUK BANYAK PEKERJA ---
def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Hitung IMT, kategori, kalori kerja, dan menu untuk data pekerja (CSV/XLSX)."
    )
    parser.add_argument("input", help="File data pekerja (kolom: berat, tinggi, beban, durasi)")
    parser.add_argument("-o", "--output", help="File CSV hasil (default: <input>_hasil.csv)")
    args = parser.parse_args(argv)

    print("=" * 50)
    print("   KALKULATOR IMT: PERHITUNGAN BATCH")
    print("=" * 50)

    # 1. LOAD DATA
    print("[1/3] Memuat data pekerja...")
    df, errs = load_batch(args.input)
    if errs:
        for e in errs:
            print(f"Gagal memuat data: {e}")
        return 1
    print(f"      {len(df)} baris dimuat.")

    # 2. HITUNG
    print("[2/3] Menghitung IMT & kalori kerja...")
    df_out = derive_batch(df)
    invalid = count_invalid_rows(df_out)
    if invalid:
        print(f"      Peringatan: {invalid} baris tanpa berat/tinggi yang valid.")

    # 3. SIMPAN
    in_path = Path(args.input)
    out_path = Path(args.output) if args.output else in_path.with_name(f"{in_path.stem}_hasil.csv")
    print(f"[3/3] Menyimpan hasil ke {out_path} ...")
    df_out.to_csv(out_path, index=False)

    print("\n=== [RINGKASAN KATEGORI IMT] ===")
    for cat, n in summarize_categories(df_out).items():
        print(f"- {cat:<11}: {n}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

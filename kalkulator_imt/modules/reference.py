from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

# ==============================================================================
# TABEL REFERENSI (KONSTANTA)
# Referensi: Klasifikasi IMT Kemenkes RI & Tabel Beban Kerja SNI
# Semua tabel bersifat immutable dan tidak bisa diubah saat runtime.
# ==============================================================================

@dataclass(frozen=True)
class CategoryInfo:
    key: str
    label: str
    description: str


@dataclass(frozen=True)
class WorkloadInfo:
    key: str
    label: str
    min: int   # kkal / jam
    max: int   # kkal / jam
    examples: Tuple[str, ...]


@dataclass(frozen=True)
class MenuItem:
    name: str
    cal: int


@dataclass(frozen=True)
class MenuRecommendation:
    calories: int
    items: Tuple[MenuItem, ...]

    @property
    def total_cal(self) -> int:
        return sum(item.cal for item in self.items)


# --- KATEGORI IMT ---
CATEGORIES = MappingProxyType({
    "Kurus": CategoryInfo(
        "Kurus", "Kurus",
        "Berat badan Anda di bawah rentang normal. Disarankan untuk meningkatkan asupan nutrisi seimbang.",
    ),
    "Normal": CategoryInfo(
        "Normal", "Normal",
        "Selamat! Berat badan Anda berada dalam rentang ideal. Pertahankan pola makan dan olahraga rutin.",
    ),
    "Overweight": CategoryInfo(
        "Overweight", "Overweight",
        "Berat badan Anda sedikit melebihi batas normal. Perhatikan porsi makan dan tingkatkan aktivitas fisik.",
    ),
    "Obesitas": CategoryInfo(
        "Obesitas", "Obesitas",
        "Berat badan Anda masuk kategori obesitas. Sebaiknya konsultasikan dengan ahli gizi atau dokter.",
    ),
    "Unknown": CategoryInfo(
        "Unknown", "-",
        "Masukkan data untuk melihat hasil.",
    ),
})

# Legenda yang ditampilkan di halaman (Klasifikasi IMT Indonesia)
CATEGORY_LEGEND = (
    ("Kurus", "< 18.5"),
    ("Normal", "18.5 - 25.0"),
    ("Overweight", "25.1 - 27.0"),
    ("Obesitas", "> 27.0"),
)

# --- BEBAN KERJA ---
WORKLOADS = MappingProxyType({
    "Ringan": WorkloadInfo(
        "Ringan", "Beban Kerja Ringan (I)", 100, 200,
        ("Menulis", "Merajut", "Menyetrika", "Mengetik", "Menyapu lantai", "Menggergaji (duduk)"),
    ),
    "Sedang": WorkloadInfo(
        "Sedang", "Beban Kerja Sedang (II)", 200, 350,
        ("Menggergaji (berdiri)", "Memukul paku", "Menambal logam", "Mengemas barang", "Memompa", "Menempa besi"),
    ),
    "Berat": WorkloadInfo(
        "Berat", "Beban Kerja Berat (III)", 350, 500,
        ("Mengepel (2 tangan)", "Membersihkan karpet", "Menggali lubang", "Menebang pohon", "Mendorong kereta muatan"),
    ),
    "None": WorkloadInfo("None", "Pilih Beban Kerja", 0, 0, ()),
})

# Urutan pilihan di form
WORKLOAD_CHOICES = ("Ringan", "Sedang", "Berat")

# Durasi kerja minimal (jam) sesuai standar SNI
MIN_DURATION_HOURS = 4
MIN_DURATION_WARNING = "Minimal 4 jam sesuai standar SNI"


def _menu(calories: int, *items: Tuple[str, int]) -> MenuRecommendation:
    return MenuRecommendation(calories, tuple(MenuItem(n, c) for n, c in items))


# --- REKOMENDASI MENU (urut naik berdasarkan kalori) ---
MENU_RECOMMENDATIONS: Tuple[MenuRecommendation, ...] = (
    _menu(400,
          ("1 roti gandum isi telur & selada", 250),
          ("1 pisang ukuran sedang", 100),
          ("Teh manis hangat", 50)),
    _menu(800,
          ("Nasi putih 150 gr", 250),
          ("Ayam goreng 1 potong sedang", 250),
          ("Tumis sayur", 100),
          ("Tahu goreng", 100),
          ("Jus jeruk", 100)),
    _menu(1200,
          ("Nasi putih 200 gr", 330),
          ("Daging sapi semur 100 gr", 250),
          ("Tempe goreng", 150),
          ("Sayur sop", 150),
          ("Susu full cream", 200),
          ("Buah", 120)),
    _menu(1800,
          ("Nasi putih 300 gr", 500),
          ("Ayam bakar 1 potong besar", 350),
          ("Telur dadar", 200),
          ("Tumis kangkung", 150),
          ("Tempe goreng", 200),
          ("Jus alpukat", 400)),
    _menu(2500,
          ("Nasi putih 400 gr", 660),
          ("Daging rendang 150 gr", 450),
          ("Ayam goreng", 300),
          ("Tempe & tahu", 300),
          ("Sayur lodeh", 250),
          ("Susu + roti", 540)),
    _menu(3500,
          ("Nasi putih 600 gr", 1000),
          ("Rendang 200 gr", 600),
          ("Ayam goreng besar", 400),
          ("Telur 2 butir", 300),
          ("Tempe goreng", 300),
          ("Sayur", 200),
          ("Jus alpukat + susu", 500),
          ("Snack kacang", 200)),
    _menu(4500,
          ("Nasi putih 800 gr", 1300),
          ("Rendang 250 gr", 750),
          ("Ayam goreng besar", 400),
          ("Telur 3 butir", 450),
          ("Tempe + tahu", 400),
          ("Sayur bersantan", 300),
          ("Susu 2 gelas", 400),
          ("Roti + selai kacang", 300),
          ("Jus alpukat + madu", 500)),
)

MENU_NOTE = (
    "* Menu ini adalah rekomendasi asupan tambahan untuk menyeimbangkan "
    "energi yang dikeluarkan selama bekerja."
)

# --- INFO HIPERTENSI ---
INFO_TITLE = "Mengapa IMT Penting?"
INFO_TEXT = (
    "Indeks Massa Tubuh (IMT) yang tidak ideal sangat berkaitan erat dengan risiko "
    "Hipertensi. Menjaga IMT dalam rentang normal adalah langkah kunci dalam "
    "mengontrol tekanan darah dan mencegah komplikasi kardiovaskular."
)

# Placeholder tampilan saat hasil belum tersedia
IMT_PLACEHOLDER = "--.-"
KALORI_PLACEHOLDER = "-- - --"

# FILE: modules/planner.py
from __future__ import annotations
from typing import Any, Dict, Optional, Sequence, Tuple
import numpy as np

from .reference import MENU_RECOMMENDATIONS, MenuRecommendation

# ==============================================================================
# MODUL REKOMENDASI MENU (PLANNER)
# Memilih paket menu asupan tambahan berdasarkan estimasi kalori kerja.
# ==============================================================================

# Ambang kalori (urut naik) untuk pencarian biner
MENU_THRESHOLDS = np.array([m.calories for m in MENU_RECOMMENDATIONS], dtype=float)


def pilih_menu(
    target_kcal: float,
    menus: Sequence[MenuRecommendation] = MENU_RECOMMENDATIONS,
) -> MenuRecommendation:
    """
    Mencari menu dengan ambang tertinggi yang masih <= target kalori.
    Jika target lebih kecil dari ambang pertama, dipakai menu terkecil.

    Tabel harus sudah terurut naik berdasarkan kalori.
    """
    if menus is MENU_RECOMMENDATIONS:
        thresholds = MENU_THRESHOLDS
    else:
        thresholds = np.array([m.calories for m in menus], dtype=float)

    # side="right": ambang yang sama dengan target ikut terpilih
    idx = int(np.searchsorted(thresholds, target_kcal, side="right")) - 1
    return menus[max(idx, 0)]


def rekomendasi_menu(cal_range: Optional[Tuple[float, float]]) -> Optional[MenuRecommendation]:
    """
    Rekomendasi menu dari rentang kalori kerja.
    Target = batas bawah rentang. Tanpa rentang kalori, tidak ada menu.
    """
    if cal_range is None:
        return None
    target = cal_range[0]
    return pilih_menu(target)


def menu_to_dict(menu: Optional[MenuRecommendation]) -> Optional[Dict[str, Any]]:
    if menu is None:
        return None
    return {
        "calories": menu.calories,
        "label": f"{menu.calories} kkal",
        "items": [{"name": it.name, "cal": it.cal} for it in menu.items],
        "total_cal": menu.total_cal,
    }

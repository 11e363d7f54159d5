from __future__ import annotations
import io
import os
import datetime
from xml.sax.saxutils import escape
from typing import Any, Dict, List, Tuple
from flask import Flask, render_template, request, send_file, jsonify

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib import colors

from kalkulator_imt.modules.calc_utils import (
    durasi_kurang, format_angka, format_imt, format_rentang_kalori,
    get_workload, hitung_imt, hitung_kalori_kerja, klasifikasi_imt,
)
from kalkulator_imt.modules.planner import menu_to_dict, rekomendasi_menu
from kalkulator_imt.modules.reference import (
    CATEGORY_LEGEND, INFO_TEXT, INFO_TITLE, MENU_NOTE, MIN_DURATION_HOURS,
    MIN_DURATION_WARNING, WORKLOAD_CHOICES, WORKLOADS,
)

app = Flask(__name__)
app.config.from_mapping(
    SECRET_KEY=os.environ.get("KALKULATOR_IMT_SECRET_KEY", "kalkulator_imt_dev_key"),
    DEBUG=os.environ.get("KALKULATOR_IMT_DEBUG", "0").lower() in ("1", "true", "ya"),
)

# Nilai awal form (durasi default 4 jam)
DEFAULT_FORM = {"berat": "", "tinggi": "", "beban": "None", "durasi": str(MIN_DURATION_HOURS)}

# ==============================================================================
# CORE LOGIC (MESIN PERHITUNGAN)
# ==============================================================================
def read_form(source: Dict[str, Any] | None) -> Dict[str, str]:
    """Ambil field form yang dikenal, sisanya diabaikan."""
    form = dict(DEFAULT_FORM)
    if not isinstance(source, dict):
        source = {}
    for key in DEFAULT_FORM:
        val = source.get(key)
        if val is not None:
            form[key] = str(val)
    return form


def compute_engine(form_data: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, str], List[str]]:
    """
    Menghitung semua nilai turunan dari input form.
    Input tidak valid tidak menghasilkan error, hanya nilai kosong (None)
    dan pesan peringatan lunak.
    """
    meta = read_form(form_data)
    warnings: List[str] = []

    # 1. IMT & Kategori
    bmi = hitung_imt(meta["berat"], meta["tinggi"])
    cat = klasifikasi_imt(bmi)

    # 2. Kalori Kerja (validasi lunak: durasi < 4 jam hanya diberi peringatan)
    workload = get_workload(meta["beban"])
    cal_range = hitung_kalori_kerja(workload.key, meta["durasi"])
    if durasi_kurang(meta["durasi"]):
        warnings.append(MIN_DURATION_WARNING)

    # 3. Rekomendasi Menu
    menu = rekomendasi_menu(cal_range)

    result = {
        "bmi": bmi,
        "bmi_display": format_imt(bmi),
        "category": cat.key,
        "category_label": cat.label,
        "category_description": cat.description,
        "calorie_range": list(cal_range) if cal_range else None,
        "calorie_display": format_rentang_kalori(cal_range),
        "workload": {
            "key": workload.key,
            "label": workload.label,
            "examples": list(workload.examples),
        },
        "menu": menu_to_dict(menu),
    }
    return result, meta, warnings

# ==============================================================================
# ROUTES (WEB ENDPOINTS)
# ==============================================================================
@app.route("/")
def index():
    res, meta, warnings = compute_engine(request.args.to_dict())
    return render_template("index.html",
                           res=res,
                           form=meta,
                           warnings=warnings,
                           workloads=WORKLOADS,
                           workload_choices=WORKLOAD_CHOICES,
                           legend=CATEGORY_LEGEND,
                           min_duration=MIN_DURATION_HOURS,
                           menu_note=MENU_NOTE,
                           info_title=INFO_TITLE,
                           info_text=INFO_TEXT,
                           year=datetime.date.today().year)


@app.route("/api/hitung", methods=["POST"])
def api_hitung():
    """Endpoint untuk hitung ulang tanpa reload halaman penuh"""
    try:
        req = request.get_json(silent=True)
        if req is None:
            req = request.form.to_dict()
        res, meta, warnings = compute_engine(req)
        return jsonify({"ok": True, "result": res, "input": meta, "warnings": warnings})
    except Exception as e:
        app.logger.exception("Gagal menghitung ulang")
        return jsonify({"ok": False, "error": str(e)}), 500


def build_pdf(res: Dict[str, Any], meta: Dict[str, str]) -> io.BytesIO:
    """Menyusun laporan PDF (IMT, kalori kerja, menu) dengan ReportLab."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4,
                            rightMargin=40, leftMargin=40,
                            topMargin=40, bottomMargin=40)

    styles = getSampleStyleSheet()
    style_title = ParagraphStyle('CustomTitle', parent=styles['Title'], fontSize=20, textColor=colors.HexColor('#064e3b'), spaceAfter=10)
    style_h2 = ParagraphStyle('CustomH2', parent=styles['Heading2'], fontSize=14, textColor=colors.HexColor('#059669'), spaceBefore=15, spaceAfter=8)
    style_normal = styles['Normal']
    style_note = ParagraphStyle('Note', parent=styles['Italic'], fontSize=8, textColor=colors.grey)

    story = []

    # --- HEADER ---
    story.append(Paragraph("Laporan Kalkulator IMT", style_title))
    story.append(Paragraph(f"Standar Kemenkes RI • {datetime.datetime.now().strftime('%d %B %Y')}", style_normal))
    story.append(Spacer(1, 20))

    # --- SECTION 1: STATUS GIZI ---
    story.append(Paragraph("Status Gizi (IMT)", style_h2))
    data_imt = [
        ["Berat Badan", f"{meta['berat']} kg"],
        ["Tinggi Badan", f"{meta['tinggi']} cm"],
        ["Skor IMT", res["bmi_display"]],
        ["Kategori", res["category_label"]],
    ]
    t_imt = Table(data_imt, colWidths=[160, 300])
    t_imt.setStyle(TableStyle([
        ('BACKGROUND', (0,0), (0,-1), colors.HexColor('#d1fae5')),
        ('GRID', (0,0), (-1,-1), 0.5, colors.lightgrey),
        ('FONTNAME', (0,0), (0,-1), 'Helvetica-Bold'),
        ('PADDING', (0,0), (-1,-1), 6),
    ]))
    story.append(t_imt)
    story.append(Spacer(1, 6))
    story.append(Paragraph(res["category_description"], style_normal))

    # --- SECTION 2: KALORI KERJA ---
    story.append(Paragraph("Kebutuhan Tambahan Kalori Kerja", style_h2))
    workload = res["workload"]
    data_kal = [
        ["Beban Kerja", workload["label"]],
        ["Durasi", f"{meta['durasi']} jam"],
        ["Estimasi Kalori", f"{res['calorie_display']} kkal / hari"],
    ]
    t_kal = Table(data_kal, colWidths=[160, 300])
    t_kal.setStyle(TableStyle([
        ('BACKGROUND', (0,0), (0,-1), colors.HexColor('#ffedd5')),
        ('GRID', (0,0), (-1,-1), 0.5, colors.lightgrey),
        ('FONTNAME', (0,0), (0,-1), 'Helvetica-Bold'),
        ('PADDING', (0,0), (-1,-1), 6),
    ]))
    story.append(t_kal)
    if workload["examples"]:
        story.append(Spacer(1, 6))
        story.append(Paragraph("Contoh Aktivitas: " + escape(", ".join(workload["examples"])), style_normal))

    # --- SECTION 3: MENU ---
    menu = res["menu"]
    if menu:
        story.append(Paragraph(f"Rekomendasi Menu Asupan (Target {menu['label']})", style_h2))
        menu_data = [["Menu", "Energi"]]
        for item in menu["items"]:
            menu_data.append([Paragraph(escape(item["name"]), styles['BodyText']), f"{item['cal']} kkal"])
        t_menu = Table(menu_data, colWidths=[360, 100])
        t_menu.setStyle(TableStyle([
            ('BACKGROUND', (0,0), (-1,0), colors.whitesmoke),
            ('GRID', (0,0), (-1,-1), 0.25, colors.lightgrey),
            ('FONTSIZE', (0,0), (-1,-1), 9),
            ('VALIGN', (0,0), (-1,-1), 'MIDDLE'),
            ('ALIGN', (1,0), (-1,-1), 'RIGHT'),
        ]))
        story.append(t_menu)
        story.append(Spacer(1, 6))
        story.append(Paragraph(MENU_NOTE, style_note))

    # --- FOOTER: INFO HIPERTENSI ---
    story.append(Paragraph(INFO_TITLE, style_h2))
    story.append(Paragraph(INFO_TEXT, style_normal))

    doc.build(story)
    buffer.seek(0)
    return buffer


@app.route("/export_pdf")
def export_pdf():
    """Unduh ringkasan hasil perhitungan dalam format PDF."""
    res, meta, _ = compute_engine(request.args.to_dict())
    if res["bmi"] is None:
        return "Data tidak valid untuk PDF. Masukkan berat dan tinggi badan.", 400

    try:
        buffer = build_pdf(res, meta)
    except Exception as e:
        app.logger.exception("Gagal membuat PDF")
        return f"Gagal membuat PDF: {str(e)}", 500

    app.logger.info("PDF dibuat: IMT %s (%s)", format_angka(res["bmi"]), res["category"])
    return send_file(buffer, as_attachment=True,
                     download_name=f"Kalkulator_IMT_{datetime.date.today()}.pdf",
                     mimetype='application/pdf')


if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"], port=5000)

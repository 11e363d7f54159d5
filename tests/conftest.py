"""Pytest fixtures for kalkulator_imt tests."""

from __future__ import annotations

import pytest

from kalkulator_imt.app import app as flask_app


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def workers_csv(tmp_path):
    """CSV data pekerja dengan nama kolom seperti dari formulir lapangan."""
    path = tmp_path / "pekerja.csv"
    path.write_text(
        "Nama,Berat Badan (kg),Tinggi Badan (cm),Beban Kerja,Durasi Kerja (jam)\n"
        "Andi,65,170,Sedang,8\n"
        "Budi,45,170,Ringan,4\n"
        "Citra,80,165,Berat,3\n"
        "Dewi,abc,160,,8\n",
        encoding="utf-8",
    )
    return path

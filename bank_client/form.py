from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Union

from bank_client.normalize import parse_form_integer
from bank_client.schemas import CATEGORICAL_OPTIONS, PredictRequest

NUMERIC_FIELDS = ("age", "balance", "duration", "campaign", "pdays", "previous")
CATEGORICAL_FIELDS = tuple(CATEGORICAL_OPTIONS)

FormNumber = Union[int, str]

FIELD_LABELS = {
    "age": "Usia",
    "job": "Pekerjaan",
    "marital": "Status Pernikahan",
    "education": "Pendidikan",
    "balance": "Saldo Rekening (€)",
    "default": "Kredit Macet",
    "housing": "Pinjaman Rumah",
    "loan": "Pinjaman Pribadi",
    "contact": "Metode Kontak",
    "duration": "Durasi Panggilan (detik)",
    "campaign": "Jumlah Kontak Kampanye Ini",
    "pdays": "Hari Sejak Kontak Terakhir (-1 = tidak pernah)",
    "previous": "Jumlah Kontak Kampanye Sebelumnya",
    "poutcome": "Hasil Kampanye Sebelumnya",
    "month": "Bulan",
}

_YES_NO_LABELS = {"no": "Tidak", "yes": "Ya"}

OPTION_LABELS: Dict[str, Dict[str, str]] = {
    "job": {
        "admin.": "Administrasi",
        "blue-collar": "Pekerja Kerah Biru",
        "entrepreneur": "Wiraswasta",
        "housemaid": "Pembantu Rumah Tangga",
        "management": "Manajemen",
        "retired": "Pensiunan",
        "self-employed": "Wirausaha",
        "services": "Pelayanan",
        "student": "Pelajar",
        "technician": "Teknisi",
        "unemployed": "Pengangguran",
        "unknown": "Tidak Diketahui",
    },
    "marital": {"married": "Menikah", "single": "Lajang", "divorced": "Bercerai"},
    "education": {
        "primary": "Sekolah Dasar",
        "secondary": "Sekolah Menengah",
        "tertiary": "Perguruan Tinggi",
        "unknown": "Tidak Diketahui",
    },
    "default": _YES_NO_LABELS,
    "housing": _YES_NO_LABELS,
    "loan": _YES_NO_LABELS,
    "contact": {"cellular": "Seluler", "telephone": "Telepon", "unknown": "Tidak Diketahui"},
    "poutcome": {"failure": "Gagal", "other": "Lainnya", "success": "Berhasil", "unknown": "Tidak Diketahui"},
    "month": {
        "jan": "Januari", "feb": "Februari", "mar": "Maret", "apr": "April",
        "may": "Mei", "jun": "Juni", "jul": "Juli", "aug": "Agustus",
        "sep": "September", "oct": "Oktober", "nov": "November", "dec": "Desember",
    },
}


def field_label(name: str) -> str:
    # fallback "some_field" -> "Some Field"
    return FIELD_LABELS.get(name) or " ".join(w.capitalize() for w in name.split("_"))


def option_label(name: str, value: str) -> str:
    return OPTION_LABELS.get(name, {}).get(value, value)


@dataclass
class CustomerInputForm:
    """Brouillon mutable d'une demande de prédiction (les champs numériques peuvent être vides)."""

    age: FormNumber = 30
    job: str = "admin."
    marital: str = "married"
    education: str = "secondary"
    balance: FormNumber = 1787
    default: str = "no"
    housing: str = "no"
    loan: str = "no"
    contact: str = "cellular"
    duration: FormNumber = 100
    campaign: FormNumber = 1
    pdays: FormNumber = -1
    previous: FormNumber = 0
    poutcome: str = "unknown"
    month: str = "jan"

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def set_field(self, name: str, raw: Any) -> None:
        if name not in self.field_names():
            raise KeyError(f"Champ inconnu: {name!r}")
        if name in NUMERIC_FIELDS:
            setattr(self, name, parse_form_integer(raw))
        else:
            setattr(self, name, raw)

    def to_payload(self) -> Dict[str, Any]:
        """Corps JSON envoyé à /predict : numériques vides -> 0."""
        payload = asdict(self)
        for key in NUMERIC_FIELDS:
            if payload[key] == "":
                payload[key] = 0
        return payload

    def to_request(self) -> PredictRequest:
        return PredictRequest(**self.to_payload())

from __future__ import annotations

import argparse
import json
import sys

from bank_client.api import build_client
from bank_client.config import configure_logging
from bank_client.controllers import Error, Ready, prediction_controller, run_page
from bank_client.form import CustomerInputForm
from bank_client.formatting import format_probability, prediction_label


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Envoie le formulaire par défaut à /predict et affiche le résultat.")
    ap.add_argument("--base-url", default=None, help="Défaut : BACKEND_API_URL ou http://localhost:8000")
    ap.add_argument("--set", action="append", default=[], metavar="FIELD=VALUE", help="Surcharge un champ du formulaire")
    args = ap.parse_args(argv)

    configure_logging()

    form = CustomerInputForm()
    for item in args.set:
        name, sep, value = item.partition("=")
        if not sep:
            ap.error(f"--set attend FIELD=VALUE, reçu {item!r}")
        try:
            form.set_field(name.strip(), value)
        except KeyError:
            ap.error(f"champ inconnu: {name.strip()!r} (attendus: {', '.join(CustomerInputForm.field_names())})")

    print("Payload:", json.dumps(form.to_payload(), ensure_ascii=False))

    state = run_page(prediction_controller(form, client_factory=lambda: build_client(base_url=args.base_url)))
    if isinstance(state, Ready):
        print("Prediction:", prediction_label(state.data.prediction))
        print("Probabilité 'yes':", format_probability(state.data.probability_yes))
        return 0

    if isinstance(state, Error):
        print("Erreur:", state.message, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())

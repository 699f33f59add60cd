import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `core.config`) works during pytest collection regardless of
# the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from tests.factories.i18n import write_message_file  # noqa: E402


@pytest.fixture
def messages_dir(tmp_path):
    """Directory of YAML message files for English, French and German.

    - en.yml: every key
    - fr.yml: every key but "only_en"
    - nested/de.yaml: a single key, one level down
    """
    write_message_file(
        tmp_path,
        "en",
        {
            "greeting": "Hello {user.name|title}",
            "cart.summary": "{count|eq:0?Your cart is empty:You have {count} items}",
            "price": "Total {amount|currency}",
            "broken": "Hi {user.missing}",
            "only_en": "English only",
        },
    )
    write_message_file(
        tmp_path,
        "fr",
        {
            "greeting": "Bonjour {user.name|title}",
            "cart.summary": "{count|eq:0?Votre panier est vide:Vous avez {count} articles}",
            "price": "Total {amount|currency:€}",
            "broken": "Salut {user.missing}",
        },
    )
    write_message_file(
        tmp_path / "nested",
        "de",
        {"greeting": "Hallo {user.name|title}"},
        filename="de.yaml",
    )
    return tmp_path

"""Built-in demo data loaded into a fresh data service.

The admin account and the two demo forms are what a brand-new process
starts with, so the console is usable without any setup.  A ``seed``
section in ``config/config.yaml`` can override any of these keys (see
:func:`src.config.loader.load_seed_config`).
"""

from __future__ import annotations

from typing import Any

DEFAULT_PASSWORD = "123"

DEFAULT_SEED: dict[str, Any] = {
    "users": [
        {"username": "admin", "password": DEFAULT_PASSWORD, "role": "ADMIN"},
        {"username": "deepanshu", "password": DEFAULT_PASSWORD, "role": "USER"},
        {"username": "dev", "password": DEFAULT_PASSWORD, "role": "USER"},
        {"username": "deepak", "password": DEFAULT_PASSWORD, "role": "USER"},
        {"username": "divyansh", "password": DEFAULT_PASSWORD, "role": "USER"},
        {"username": "daksh", "password": DEFAULT_PASSWORD, "role": "USER"},
    ],
    "forms": [
        {
            "title": "General Website Feedback",
            "description": "Tell us what you think...",
            "rating_categories": ["Overall Experience"],
        },
        {
            "title": "Product Support Survey",
            "description": "How was support?",
            "rating_categories": ["Speed", "Clarity", "Friendliness"],
        },
    ],
}

# =============================================================================
# src/cli/__init__.py - CLI Module Overview
# =============================================================================
#
# The console is the only front end of feedbackDesk.  It runs in-process
# against the data service; there is no server and nothing is persisted,
# so every run starts from the seeded demo data.
#
# Architecture Notes:
#   - argparse for flags (not Click/Typer).
#   - The bootstrap import is deferred inside main() so `--help` stays fast
#     and never reads settings.
# =============================================================================

"""CLI tools for feedbackDesk.

- ``python -m src.cli`` - interactive console (role selection, feedback
  submission, admin dashboard).
"""

"""Streamlit Cloud entry point.

Hosted deployments launch ``streamlit_app.py``; the screens are wired up in
:mod:`research_desk_app`.
"""

from research_desk_app import main

if __name__ == "__main__":  # pragma: no cover
    main()

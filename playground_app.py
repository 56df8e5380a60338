"""Launch with ``streamlit run playground_app.py``."""

from canvas_playground.app import main

if __name__ == "__main__":
    main()

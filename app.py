import os

from galleryadmin import create_app

app = create_app()


if __name__ == "__main__":
    # Local dev only. In production run: gunicorn app:app
    app.run(host="127.0.0.1", port=int(os.environ.get("PORT", "5000")), debug=True)

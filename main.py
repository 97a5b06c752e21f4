# main.py

from blog_backend.main import app, run

__all__ = ["app"]

if __name__ == "__main__":
    run()

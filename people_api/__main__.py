"""Allow `python -m people_api` to start the server."""
from people_api.api.main import run

if __name__ == "__main__":
    run()

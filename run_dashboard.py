import logging
import sys

from frontend.app import create_app
from pathsim.config import DEFAULT_CONFIG_PATH, load_config

# This is the entry point to run the Dash server
if __name__ == "__main__":
    config = load_config(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_PATH)
    logging.basicConfig(level=config["log_level"], format="%(levelname)s %(name)s: %(message)s")

    port = config["dashboard"]["port"]
    print("Starting Dash server...")
    print(f"Dashboard will be running at http://127.0.0.1:{port}/")
    app = create_app(config)
    app.run(debug=config["dashboard"]["debug"], port=port)

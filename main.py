import logging
import sys

from pathsim.config import DEFAULT_CONFIG_PATH, load_config
from pathsim.simulation import run_session
from pathsim.visualize import draw_graph

if __name__ == "__main__":
    config = load_config(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_PATH)
    logging.basicConfig(level=config["log_level"], format="%(levelname)s %(name)s: %(message)s")

    editor = run_session(config)
    if config.get("plot_path"):
        draw_graph(editor.graph, editor.last_result, path=config["plot_path"])
        print(f"Saved graph snapshot to: {config['plot_path']}")

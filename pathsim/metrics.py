import numpy as np


class Metrics:
    """Running record of path queries served by an editor session."""

    def __init__(self):
        self.data = {
            "distance": [],
            "hops": [],
            "reachable": []
        }

    def log(self, result):
        self.data["reachable"].append(1.0 if result.reachable else 0.0)
        if result.reachable:
            self.data["distance"].append(result.distance)
            self.data["hops"].append(len(result.path) - 1)

    @property
    def queries(self):
        return len(self.data["reachable"])

    def summary(self):
        return {k: float(np.mean(v)) if v else 0.0 for k, v in self.data.items()}

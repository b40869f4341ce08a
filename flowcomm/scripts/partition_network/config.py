import os
from typing import Any, Dict, List, Optional

import yaml
from pydantic.dataclasses import dataclass

MATRIX_EXTENSIONS = (".npy", ".npz", ".csv", ".txt")


@dataclass(frozen=True)
class Config:
    """Configuration for partitioning a network file with Infomap."""

    matrix_file: str
    output_file: str
    options: Optional[Dict[str, Any]] = None
    true_labels_file: Optional[str] = None
    metrics_file: Optional[str] = None
    silent: bool = True
    random_state: Optional[int] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not os.path.exists(self.matrix_file):
            raise ValueError(f"Matrix file does not exist: {self.matrix_file}")

        if not self.matrix_file.lower().endswith(MATRIX_EXTENSIONS):
            raise ValueError(f"Unsupported matrix file '{self.matrix_file}'. Must end with one of: {MATRIX_EXTENSIONS}")

        if self.true_labels_file is not None and not os.path.exists(self.true_labels_file):
            raise ValueError(f"True labels file does not exist: {self.true_labels_file}")

        for output_path in (self.output_file, self.metrics_file):
            if output_path is None:
                continue
            output_dir = os.path.dirname(output_path)
            if output_dir and not os.path.exists(output_dir):
                raise ValueError(f"Output directory does not exist: {output_dir}")

    def option_pairs(self) -> List[Any]:
        """Options flattened to ``[name1, value1, name2, value2, ...]`` in file order"""
        pairs: List[Any] = []
        for name, value in (self.options or {}).items():
            pairs.extend([name, value])
        return pairs

    @classmethod
    def from_yaml(cls, config_file: str) -> "Config":
        """Load configuration from YAML file."""
        if not os.path.exists(config_file):
            raise ValueError(f"Config file does not exist: {config_file}")

        with open(config_file, "r") as f:
            config_dict = yaml.safe_load(f)

        required_fields = ["matrix_file", "output_file"]
        for field in required_fields:
            if field not in config_dict:
                raise ValueError(f"Missing required field '{field}' in config file")

        # Convert relative paths to absolute paths
        paths = {}
        for key in ("matrix_file", "output_file", "true_labels_file", "metrics_file"):
            path = config_dict.get(key)
            if path is not None and not os.path.isabs(path):
                path = os.path.abspath(path)
            paths[key] = path

        return cls(
            options=config_dict.get("options"),
            silent=config_dict.get("silent", True),
            random_state=config_dict.get("random_state"),
            **paths,
        )

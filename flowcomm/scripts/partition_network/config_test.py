import pytest
import yaml

from flowcomm.scripts.partition_network.config import Config


def write_yaml(path, content):
    path.write_text(yaml.safe_dump(content, sort_keys=False))
    return str(path)


class TestConfig:
    def test_from_yaml(self, tmp_path):
        matrix_file = tmp_path / "network.csv"
        matrix_file.write_text("0,1\n1,0\n")
        config_file = write_yaml(
            tmp_path / "config.yaml",
            {
                "matrix_file": str(matrix_file),
                "output_file": str(tmp_path / "membership.csv"),
                "options": {"N": 5, "markov-time": 0.5},
                "random_state": 3,
            },
        )

        config = Config.from_yaml(config_file)

        assert config.matrix_file == str(matrix_file)
        assert config.option_pairs() == ["N", 5, "markov-time", 0.5]
        assert config.silent is True
        assert config.random_state == 3

    def test_relative_paths_made_absolute(self, tmp_path, monkeypatch):
        (tmp_path / "network.npy").write_bytes(b"")
        monkeypatch.chdir(tmp_path)
        config_file = write_yaml(tmp_path / "config.yaml", {"matrix_file": "network.npy", "output_file": "out.csv"})

        config = Config.from_yaml(config_file)

        assert config.matrix_file == str(tmp_path / "network.npy")
        assert config.output_file == str(tmp_path / "out.csv")

    def test_missing_field(self, tmp_path):
        config_file = write_yaml(tmp_path / "config.yaml", {"matrix_file": "network.csv"})
        with pytest.raises(ValueError, match="output_file"):
            Config.from_yaml(config_file)

    def test_missing_matrix_file(self, tmp_path):
        with pytest.raises(ValueError, match="does not exist"):
            Config(matrix_file=str(tmp_path / "missing.csv"), output_file=str(tmp_path / "out.csv"))

    def test_unsupported_extension(self, tmp_path):
        matrix_file = tmp_path / "network.mat"
        matrix_file.write_bytes(b"")
        with pytest.raises(ValueError, match="Unsupported matrix file"):
            Config(matrix_file=str(matrix_file), output_file=str(tmp_path / "out.csv"))

    def test_missing_output_directory(self, tmp_path):
        matrix_file = tmp_path / "network.csv"
        matrix_file.write_text("0,1\n1,0\n")
        with pytest.raises(ValueError, match="Output directory"):
            Config(matrix_file=str(matrix_file), output_file=str(tmp_path / "nope" / "out.csv"))

    def test_no_options(self, tmp_path):
        matrix_file = tmp_path / "network.csv"
        matrix_file.write_text("0,1\n1,0\n")
        config = Config(matrix_file=str(matrix_file), output_file=str(tmp_path / "out.csv"))
        assert config.option_pairs() == []

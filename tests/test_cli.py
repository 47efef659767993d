"""
Tests for the pybundle command line.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from pybundle.cli import create_parser, main
from pybundle.errors import DownloadError
from pybundle.runtime.platforms import PLATFORMS


@pytest.fixture
def workdir(tmp_path, clean_env):
    """Run in an empty directory so no stray .env is picked up."""
    clean_env.chdir(tmp_path)
    return tmp_path


def _writes(data: bytes):
    def fake_download(url, dest, **kwargs):
        Path(dest).write_bytes(data)
        return dest
    return fake_download


class TestParser:

    def test_platform_is_optional(self):
        args = create_parser().parse_args([])
        assert args.platform is None
        assert args.force is False

    def test_flags(self):
        args = create_parser().parse_args(["linux-x64", "-f", "-q", "--resources-dir", "out"])
        assert args.platform == "linux-x64"
        assert args.force is True
        assert args.quiet is True
        assert args.resources_dir == "out"


class TestMain:

    def test_unsupported_platform_exits_1(self, workdir, capsys):
        with patch("pybundle.runtime.install.download") as dl:
            code = main(["plan9-x64", "--resources-dir", str(workdir / "res")])

        assert code == 1
        dl.assert_not_called()
        err = capsys.readouterr().err
        assert "Unsupported platform: plan9-x64" in err
        assert "Supported platforms: " + ", ".join(PLATFORMS) in err

    def test_already_installed_exits_0_without_network(self, workdir):
        (workdir / "res" / "linux-x64" / "python").mkdir(parents=True)
        with patch("pybundle.runtime.install.download") as dl:
            code = main(["linux-x64", "--resources-dir", str(workdir / "res")])
        assert code == 0
        dl.assert_not_called()

    def test_setup_success(self, workdir, tar_gz_bytes):
        with patch("pybundle.runtime.install.download", side_effect=_writes(tar_gz_bytes)):
            code = main(["darwin-arm64", "-q", "--resources-dir", str(workdir / "res")])
        assert code == 0
        assert (workdir / "res" / "darwin-arm64" / "python" / "bin" / "python3").exists()

    def test_default_resources_dir(self, workdir, tar_gz_bytes):
        with patch("pybundle.runtime.install.download", side_effect=_writes(tar_gz_bytes)):
            code = main(["linux-x64", "-q"])
        assert code == 0
        assert (workdir / "resources" / "python" / "linux-x64" / "python").is_dir()

    def test_defaults_to_host_platform(self, workdir):
        (workdir / "res" / "linux-arm64" / "python").mkdir(parents=True)
        with patch("pybundle.cli.get_platform_key", return_value="linux-arm64"), \
                patch("pybundle.runtime.install.download") as dl:
            code = main(["--resources-dir", str(workdir / "res")])
        assert code == 0
        dl.assert_not_called()

    def test_download_failure_exits_1(self, workdir, capsys):
        with patch("pybundle.runtime.install.download",
                   side_effect=DownloadError("Download failed with status 500", 500)):
            code = main(["linux-x64", "--resources-dir", str(workdir / "res")])
        assert code == 1
        assert "Setup failed: Download failed with status 500" in capsys.readouterr().err

    def test_list(self, workdir, capsys):
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        for key, descriptor in PLATFORMS.items():
            assert key in out
            assert descriptor.url in out

    def test_remove(self, workdir):
        (workdir / "res" / "win32-x64" / "python").mkdir(parents=True)
        code = main(["win32-x64", "--remove", "--resources-dir", str(workdir / "res")])
        assert code == 0
        assert not (workdir / "res" / "win32-x64").exists()

    def test_version(self, workdir, capsys):
        assert main(["-V"]) == 0
        out = capsys.readouterr().out
        assert "pybundle: v" in out
        assert "3.11.9+20240726" in out

    def test_resources_dir_from_dotenv(self, workdir, tar_gz_bytes):
        (workdir / ".env").write_text(f"PYBUNDLE_RESOURCES_DIR={workdir / 'from-env'}\n")
        with patch.dict("os.environ"), \
                patch("pybundle.runtime.install.download", side_effect=_writes(tar_gz_bytes)):
            code = main(["linux-x64", "-q"])
        assert code == 0
        assert (workdir / "from-env" / "linux-x64" / "python").is_dir()

    def test_rerun_after_failed_extraction_downloads_again(self, workdir, tar_gz_bytes, capsys):
        res = str(workdir / "res")
        with patch("pybundle.runtime.install.download", side_effect=_writes(b"garbage")):
            assert main(["linux-x64", "-q", "--resources-dir", res]) == 1
        assert "Setup failed:" in capsys.readouterr().err

        with patch("pybundle.runtime.install.download", side_effect=_writes(tar_gz_bytes)) as dl:
            assert main(["linux-x64", "-q", "--resources-dir", res]) == 0
        dl.assert_called_once()
        assert (workdir / "res" / "linux-x64" / "python" / "bin" / "python3").exists()

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "verify_cluster.py"


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("verify_cluster", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize("flavour", ["6", "7", "8", "snapshot"])
def test_trusted_flavours_exit_zero(script, capsys, flavour):
    assert script.main(["--mock", flavour]) == 0
    assert "VERIFIED: VERIFIED_TRUSTED" in capsys.readouterr().out


@pytest.mark.parametrize("flavour", ["opensearch", "7-oss"])
def test_untrusted_flavours_exit_one(script, capsys, flavour):
    assert script.main(["--mock", flavour]) == 1
    assert "NOT VERIFIED" in capsys.readouterr().out


def test_forbidden_flavour_is_verified_with_warning(script, capsys):
    with pytest.warns(UserWarning):
        assert script.main(["--mock", "forbidden"]) == 0
    assert "VERIFIED_WITH_PRIVILEGE_WARNING" in capsys.readouterr().out

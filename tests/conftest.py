import pytest

from tms_parser import parse

from .samples import reference_document


@pytest.fixture(scope="session")
def reference_bytes() -> bytes:
    return reference_document()


@pytest.fixture
def doc(reference_bytes):
    """Świeży dokument dla każdego testu (mutacje nie przeciekają)."""
    return parse(reference_bytes)


@pytest.fixture
def tms_file(tmp_path, reference_bytes):
    path = tmp_path / "A_000.TMS"
    path.write_bytes(reference_bytes)
    return path


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Ustawienia CLI niezależne od środowiska uruchamiającego testy."""
    from tmsedit._config import get_settings

    for name in ("TMS_LOG_LEVEL", "TMS_BACKUP", "TMS_DEFAULT_DEPARTMENT", "TMS_DEFAULT_UNIT_TYPE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

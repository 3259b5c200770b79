import pytest
from fastapi.testclient import TestClient
from mic_upload.config import Settings
from mic_upload.dependencies import get_clock, get_plot_runner
from mic_upload.main import create_app
from mic_upload.models.experiment import ExperimentFields
from mic_upload.models.sample import PlotRunResult
from mic_upload.services.plot_runner import PlotRunner
from mic_upload.storage.memory_storage import get_registry

FIXED_TIME = 1700000000

class FakePlotRunner(PlotRunner):
    """Records invocations instead of spawning Rscript"""

    def __init__(self, settings: Settings, produce_plot: bool = True, return_code: int = 0):
        super().__init__(settings)
        self.produce_plot = produce_plot
        self.return_code = return_code
        self.calls = []

    async def run(self, identifier: str, fields: ExperimentFields) -> PlotRunResult:
        command = self.build_command(identifier, fields)
        self.calls.append(command)
        if self.produce_plot:
            (self.settings.output_path / f"mic-plot-{identifier}.png").write_bytes(b"\x89PNG\r\n")
        return PlotRunResult(command=command, returnCode=self.return_code)

@pytest.fixture
def settings(tmp_path):
    return Settings(app_root=tmp_path)

@pytest.fixture
def runner(settings):
    return FakePlotRunner(settings)

@pytest.fixture
def app(settings, runner):
    app = create_app(settings)
    app.dependency_overrides[get_plot_runner] = lambda: runner
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_TIME)
    yield app
    get_registry().clear_all()

@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client

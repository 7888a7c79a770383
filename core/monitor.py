import logging
from flask import Flask
from werkzeug.serving import make_server

from config.settings import TempMonConfig, setup_logging
from core.cache import TemperatureCache
from core.metrics import ProbeMetrics
from sensors.probe import discover_probes
from tasks.sampling_task import SamplingTask
from web.routes import WebRoutes

logger = logging.getLogger(__name__)

class TemperatureMonitor:
    """Main monitor class yang mengelola seluruh sistem monitoring"""

    def __init__(self, config=None, probes=None):
        self.config = config or TempMonConfig()
        setup_logging(self.config.LOG_LEVEL)

        # Discovery and resolution setup finish before the first tick
        if probes is None:
            probes = discover_probes(
                self.config.PROBE_LABELS,
                self.config.CALIBRATION_OFFSETS,
                devices_path=self.config.W1_DEVICES_PATH,
            )
            for probe in probes:
                probe.set_resolution(self.config.PROBE_RESOLUTION)
        self.probes = probes

        # Every probe starts out with no reading
        self.cache = TemperatureCache(p.name for p in self.probes)
        self.metrics = ProbeMetrics()
        self.metrics.register_probes(self.probes)

        self.sampling_task = SamplingTask(self.probes, self.cache, self.metrics, self.config.PROBE_INTERVAL)
        self.server = None

    def create_flask_app(self):
        """Create dan configure Flask application"""
        app = Flask(__name__, template_folder='../templates', static_folder='../static')

        # Register routes
        web_routes = WebRoutes(self.config, self.cache, self.metrics)
        web_routes.register_routes(app)

        return app

    def run(self):
        """Run the complete monitoring system"""
        if not self.probes:
            logger.warning("No probes discovered. Serving an empty dashboard.")

        app = self.create_flask_app()
        try:
            self.server = make_server(self.config.BIND_HOST, self.config.METRICS_PORT, app, threaded=True)
        except SystemExit:
            # werkzeug reports a failed bind on stderr and exits
            raise OSError(f"cannot listen on {self.config.BIND_HOST}:{self.config.METRICS_PORT}") from None
        logger.info(f"http server listening on {self.config.BIND_HOST}:{self.config.METRICS_PORT}")

        self.sampling_task.start()
        try:
            self.server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
        finally:
            self.sampling_task.stop()
            self.server.server_close()

from flask import render_template, jsonify, Response
from werkzeug.exceptions import HTTPException
import logging

from .dashboard import build_rows

logger = logging.getLogger(__name__)

class WebRoutes:
    """Class untuk mengelola semua web routes"""
    
    def __init__(self, config, cache, metrics):
        self.config = config
        self.cache = cache
        self.metrics = metrics
        
    def register_routes(self, app):
        """Register semua routes ke Flask app"""
        
        # === Metrics Routes ===
        @app.route("/metrics")
        def metrics():
            payload, content_type = self.metrics.render()
            return Response(payload, content_type=content_type)
        
        # === Main Dashboard Routes ===
        @app.route("/")
        def index():
            # copy under the lock, render without it
            snapshot = self.cache.snapshot()
            context = {
                "rows": build_rows(snapshot),
                "refresh": self.config.DASHBOARD_REFRESH,
                "current_time": self.config.format_utc_time(),
            }
            return render_template("index.html", **context)
        
        @app.route("/api/temperatures")
        def temperatures():
            snapshot = self.cache.snapshot()
            return jsonify({
                "temperatures": {name: snapshot[name] for name in sorted(snapshot)},
                "timestamp": self.config.format_utc_time(),
            })
        
        # === Utility Routes ===
        @app.route("/health")
        def health():
            return Response("OK", mimetype="text/plain")
        
        # === Error Handlers ===
        @app.errorhandler(404)
        def not_found(e):
            return Response("404 Not Found", status=404, mimetype="text/plain")
        
        @app.errorhandler(Exception)
        def internal_error(e):
            if isinstance(e, HTTPException):
                return Response(f"{e.code} {e.name}", status=e.code, mimetype="text/plain")
            logger.error(f"Unhandled error serving request: {e}", exc_info=True)
            return Response("500 Internal Server Error", status=500, mimetype="text/plain")

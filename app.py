import logging
from functools import wraps
from typing import Any, Mapping, Optional

from flask import (
    Flask,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)

from array_queue import CompactionPolicy
from models import QueueKind
from queue_lab import QueueLab

LOGGER = logging.getLogger(__name__)


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)

    app.config["SECRET_KEY"] = "dev-secret-key"
    app.config["QUEUE_COMPACT_MIN_LENGTH"] = 20
    app.config["QUEUE_COMPACT_MIN_RATIO"] = 0.25
    app.config["QUEUE_HISTORY_LIMIT"] = 50

    # QUEUELAB_QUEUE_HISTORY_LIMIT=10 などで上書きできる
    app.config.from_prefixed_env("QUEUELAB")

    if config:
        app.config.update(config)

    policy = CompactionPolicy(
        min_length=int(app.config["QUEUE_COMPACT_MIN_LENGTH"]),
        min_ratio=float(app.config["QUEUE_COMPACT_MIN_RATIO"]),
    )
    app.extensions["queue_lab"] = QueueLab(
        policy=policy,
        history_limit=int(app.config["QUEUE_HISTORY_LIMIT"]),
    )
    LOGGER.info("queue lab ready (compaction: %s)", policy)

    app.register_error_handler(404, _not_found)
    _register_routes(app)
    return app


def get_lab() -> QueueLab:
    return current_app.extensions["queue_lab"]


def _not_found(error):
    if request.path.startswith("/api/"):
        return jsonify({"error": "not found"}), 404
    return error


# -------------------------
# 共通：Queue 種別の解決
# -------------------------
def require_kind(api: bool = False):
    def wrapper(fn):
        @wraps(fn)
        def inner(kind: str, *args, **kwargs):
            parsed = QueueKind.parse(kind)
            if parsed is None:
                if api:
                    return jsonify({"error": f"unknown queue: {kind}"}), 404
                flash(f"存在しない Queue です：{kind}", "error")
                return redirect(url_for("dashboard"))
            return fn(parsed, *args, **kwargs)
        return inner
    return wrapper


def _register_routes(app: Flask) -> None:
    # -------------------------
    # 画面
    # -------------------------
    @app.route("/", methods=["GET"])
    def dashboard():
        lab = get_lab()
        return render_template(
            "dashboard.html",
            snapshots=lab.snapshots(),
            history=list(reversed(lab.history())),
            policy=lab.policy,
        )

    @app.route("/queues/all/enqueue", methods=["POST"])
    def enqueue_all():
        ok, msg = get_lab().enqueue_all(request.form.get("value") or "")
        flash(msg, "success" if ok else "error")
        return redirect(url_for("dashboard"))

    @app.route("/queues/all/dequeue", methods=["POST"])
    def dequeue_all():
        ok, msg = get_lab().dequeue_all()
        flash(msg, "success" if ok else "error")
        return redirect(url_for("dashboard"))

    @app.route("/queues/<kind>/enqueue", methods=["POST"])
    @require_kind()
    def enqueue(kind: QueueKind):
        ok, msg = get_lab().enqueue(kind, request.form.get("value") or "")
        flash(msg, "success" if ok else "error")
        return redirect(url_for("dashboard"))

    @app.route("/queues/<kind>/dequeue", methods=["POST"])
    @require_kind()
    def dequeue(kind: QueueKind):
        ok, msg = get_lab().dequeue(kind)
        flash(msg, "success" if ok else "error")
        return redirect(url_for("dashboard"))

    @app.route("/reset", methods=["POST"])
    def reset():
        ok, msg = get_lab().reset()
        flash(msg, "success" if ok else "error")
        return redirect(url_for("dashboard"))

    # -------------------------
    # JSON API
    # -------------------------
    @app.route("/api/queues", methods=["GET"])
    def api_list_queues():
        return jsonify([s.to_dict() for s in get_lab().snapshots()]), 200

    @app.route("/api/queues/<kind>", methods=["GET"])
    @require_kind(api=True)
    def api_get_queue(kind: QueueKind):
        return jsonify(get_lab().snapshot(kind).to_dict()), 200

    @app.route("/api/queues/<kind>", methods=["POST"])
    @require_kind(api=True)
    def api_enqueue(kind: QueueKind):
        data = request.get_json(silent=True) or {}
        value = data.get("value")
        if not isinstance(value, str):
            return jsonify({"error": "value (string) is required"}), 400

        lab = get_lab()
        ok, msg = lab.enqueue(kind, value)
        if not ok:
            return jsonify({"error": msg}), 400
        return jsonify(lab.snapshot(kind).to_dict()), 201

    @app.route("/api/queues/<kind>", methods=["DELETE"])
    @require_kind(api=True)
    def api_dequeue(kind: QueueKind):
        lab = get_lab()
        value = lab.pop(kind)
        # 空なら value は null（エラーではない）
        return jsonify({"value": value, "queue": lab.snapshot(kind).to_dict()}), 200


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(threadName)s "
               "%(filename)s:%(lineno)d %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S")

    app.run(debug=True)

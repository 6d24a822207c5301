from typing import Mapping, Optional

from flask import Flask, current_app, jsonify, request

from exceptions import NotFoundError, ValidationError
from models import Receipt
from points import score
from store import ReceiptStore
from validation import validate

HOST = "0.0.0.0"
PORT = 8080
LOG_LEVEL = "INFO"
INVALID_RECEIPT_DESCRIPTION = "The receipt is invalid."
RECEIPT_NOT_FOUND_DESCRIPTION = "No receipt found for that ID."


def get_store() -> ReceiptStore:
    return current_app.extensions["receipt_store"]


def process_receipt():
    """
    Router for receipt processing requests. The input JSON is validated and,
    if it is a valid receipt, it is stored in the application's memory under
    a newly generated id which is returned to the user. Points are not
    computed here; they are calculated whenever they are requested.

    Returns:
        400 Error if input JSON is invalid
        200 OK and generated receipt id if input JSON is valid
    """
    receipt = Receipt.from_json(request.get_json(silent=True))
    validate(receipt)
    receipt_id = get_store().insert(receipt)
    current_app.logger.info("Stored receipt %s", receipt_id)
    return jsonify({"id": receipt_id})


def get_points(receipt_id):
    """
    Router for receipt points requests. The input receipt id is used
    to look up its associated receipt in the application's memory and the
    points are calculated from it.

    Returns:
        404 Error if the receipt id is not found
        200 OK and the calculated points for the receipt if receipt id is present in memory
    """
    receipt = get_store().get(receipt_id)
    if receipt is None:
        raise NotFoundError(receipt_id)
    points = score(receipt)
    current_app.logger.info("Receipt %s is worth %d points", receipt_id, points)
    return jsonify({"points": points})


def handle_invalid_receipt(e: ValidationError):
    # the reason stays in the server log, the client only learns the receipt is invalid
    current_app.logger.info("Rejected receipt: %s", e)
    return jsonify({"description": INVALID_RECEIPT_DESCRIPTION}), 400


def handle_receipt_not_found(e: NotFoundError):
    current_app.logger.info("No receipt stored under id %s", e.receipt_id)
    return jsonify({"description": RECEIPT_NOT_FOUND_DESCRIPTION}), 404


def create_app(store: Optional[ReceiptStore] = None, config: Optional[Mapping] = None) -> Flask:
    """
    Builds the receipt processor application.

    Settings default to the module constants and can be overridden with
    RECEIPTS_* environment variables (e.g. RECEIPTS_PORT=9000) and then with
    the explicit config mapping.
    """
    app = Flask(__name__)
    app.config.update(HOST=HOST, PORT=PORT, LOG_LEVEL=LOG_LEVEL)
    app.config.from_prefixed_env("RECEIPTS")
    if config:
        app.config.update(config)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    app.extensions["receipt_store"] = store if store is not None else ReceiptStore()

    app.add_url_rule('/receipts/process', view_func=process_receipt, methods=['POST'])
    app.add_url_rule('/receipts/<receipt_id>/points', view_func=get_points, methods=['GET'])
    app.register_error_handler(ValidationError, handle_invalid_receipt)
    app.register_error_handler(NotFoundError, handle_receipt_not_found)
    return app


flask_app = create_app()


if __name__ == '__main__':
    flask_app.run(host=flask_app.config["HOST"], port=flask_app.config["PORT"], threaded=True)
    # setting threaded=True allows Flask to concurrently handle requests

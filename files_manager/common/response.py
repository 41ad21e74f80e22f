from flask import jsonify


def success(data=None, status=200):
    return jsonify(data if data is not None else {}), status


def fail(msg="error", status=400):
    return jsonify({"error": msg}), status


def no_content():
    return "", 204

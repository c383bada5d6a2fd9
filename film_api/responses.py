from flask import Response


def text_response(message, status=200, headers=None):
    return Response(message, status=status, headers=headers, mimetype="text/plain")

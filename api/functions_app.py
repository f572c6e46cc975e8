import json

import azure.functions as func

from papergen import logic

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

@app.route(route="health")
def health(req: func.HttpRequest) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps({"status": "ok", "message": "Functions host responding"}),
        status_code=200,
        mimetype="application/json",
    )

# Every method is routed here; the handler answers non-POST with 405.
@app.route(route="generate")
def generate(req: func.HttpRequest) -> func.HttpResponse:
    return logic.handle(req)

import azure.functions as func  # type: ignore

from . import logic  # type: ignore


def main(req: func.HttpRequest) -> func.HttpResponse:  # type: ignore
    return logic.handle(req)

from fastapi import APIRouter, Response
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

# HTTP
REQUESTS = Counter("http_requests_total", "HTTP requests", ["path", "method", "status"])
LATENCY  = Histogram(
    "http_request_duration_seconds", "HTTP request duration (s)", ["path", "method"],
    buckets=(0.05,0.1,0.2,0.5,1,2,5,10)
)

# Domínio
DDB_OPS = Counter("dynamodb_operations_total", "DynamoDB operations", ["op","status"])       # op: put,get,batch_get; status: ok,error,unprocessed
USER_CREATIONS = Counter("user_creations_total", "User creation attempts", ["outcome"])      # outcome: created,invalid,missing_operators,persistence_error,lookup_error

router_metrics = APIRouter()
@router_metrics.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

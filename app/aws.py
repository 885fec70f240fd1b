import boto3
from .config import settings

_session = boto3.session.Session(region_name=settings.aws_region)

ddb = _session.resource("dynamodb", endpoint_url=settings.aws_endpoint_url)

table_users = ddb.Table(settings.ddb_users_table)
table_operators = ddb.Table(settings.ddb_operators_table)

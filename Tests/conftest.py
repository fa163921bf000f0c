import os

# pin the AWS settings DB.Config reads at import, before any test module imports it
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ.pop("DYNAMODB_ENDPOINT_URL", None)
os.environ["LOG_LEVEL"] = "WARNING"

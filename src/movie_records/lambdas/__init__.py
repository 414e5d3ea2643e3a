"""AWS Lambda entry points for API Gateway proxy events."""

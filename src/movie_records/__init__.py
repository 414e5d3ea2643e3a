"""Movie records service - read and delete movie records in DynamoDB."""

__version__ = "0.1.0"

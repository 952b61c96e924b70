import json
import logging

import boto3

logger = logging.getLogger(__name__)


def get_secret(secret_name: str, region_name: str = "us-east-1") -> dict:
    """
    Retrieves the given secret from AWS Secrets Manager.

    Used by the settings module to read the database credentials of the
    deployed environments.

    :param secret_name str: the name of the secret to get
    :param region_name: the name of the AWS region, defaults to us-east-1
    :return dict: the decoded JSON payload of the secret
    """
    session = boto3.session.Session()
    client = session.client(service_name="secretsmanager", region_name=region_name)
    response = client.get_secret_value(SecretId=secret_name)
    logger.info("Loaded secret %s from %s", secret_name, region_name)
    return json.loads(response["SecretString"])

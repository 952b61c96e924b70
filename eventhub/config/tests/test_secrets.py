import json
from unittest.mock import MagicMock, patch

from botocore.exceptions import ClientError
from django.test import SimpleTestCase

from config import settings as project_settings
from config.secrets import get_secret


def _fake_session(fake_boto3_session, payload):
    mock_client = MagicMock()
    mock_client.get_secret_value.return_value = {"SecretString": json.dumps(payload)}
    mock_session_instance = MagicMock()
    mock_session_instance.client.return_value = mock_client
    fake_boto3_session.return_value = mock_session_instance
    return mock_session_instance, mock_client


class GetSecretTests(SimpleTestCase):
    @patch("config.secrets.boto3.session.Session")
    def test_get_secret_returns_db_credentials(self, fake_boto3_session):
        session, client = _fake_session(
            fake_boto3_session, {"username": "eventhub", "password": "s3cret"}
        )

        with self.assertLogs("config.secrets", level="INFO"):
            result = get_secret("eventhub/db", region_name="us-east-2")

        self.assertEqual(result, {"username": "eventhub", "password": "s3cret"})
        session.client.assert_called_once_with(
            service_name="secretsmanager", region_name="us-east-2"
        )
        client.get_secret_value.assert_called_once_with(SecretId="eventhub/db")

    @patch("config.secrets.boto3.session.Session")
    def test_get_secret_propagates_client_errors(self, fake_boto3_session):
        session, client = _fake_session(fake_boto3_session, {})
        client.get_secret_value.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "missing"}},
            "GetSecretValue",
        )
        with self.assertRaises(ClientError):
            get_secret("eventhub/missing")


class DatabaseSettingsTests(SimpleTestCase):
    def test_local_runs_use_sqlite(self):
        with patch.object(project_settings, "ENVIRONMENT", "local"):
            db = project_settings._database_settings()
        self.assertEqual(db["ENGINE"], "django.db.backends.sqlite3")

    def test_deployed_runs_read_credentials_from_secret(self):
        env = {"DB_SECRET_NAME": "eventhub/db", "DB_HOST": "db.internal"}
        with patch.object(project_settings, "ENVIRONMENT", "production"), patch.object(
            project_settings, "TESTING", False
        ), patch.dict("os.environ", env), patch(
            "config.secrets.get_secret",
            return_value={"username": "svc", "password": "pw"},
        ) as fake_get_secret:
            db = project_settings._database_settings()

        fake_get_secret.assert_called_once()
        self.assertEqual(db["ENGINE"], "django.db.backends.postgresql")
        self.assertEqual((db["USER"], db["PASSWORD"], db["HOST"]), ("svc", "pw", "db.internal"))

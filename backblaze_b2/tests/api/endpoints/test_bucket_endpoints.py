from unittest.mock import Mock

from backblaze_b2.api.endpoints.buckets import (
    create_bucket,
    delete_bucket,
    list_buckets,
    update_bucket,
)
from backblaze_b2.models.bucket import BucketType
from backblaze_b2.tests.constants import ACCOUNT_ID
from backblaze_b2.tests.utils.mock_transport import load_fixture


def test_create_bucket_posts_name_and_type(mock_http: Mock) -> None:
    mock_http.request.return_value = load_fixture("create_bucket_public.json")

    response = create_bucket(mock_http, ACCOUNT_ID, "Test bucket", BucketType.PUBLIC)

    mock_http.request.assert_called_once_with(
        "POST",
        "/b2_create_bucket",
        {"accountId": ACCOUNT_ID, "bucketName": "Test bucket", "bucketType": "allPublic"},
    )
    assert response == load_fixture("create_bucket_public.json")


def test_update_bucket_posts_id_and_type(mock_http: Mock) -> None:
    mock_http.request.return_value = load_fixture("update_bucket.json")

    update_bucket(mock_http, ACCOUNT_ID, "bucketId", BucketType.PRIVATE)

    mock_http.request.assert_called_once_with(
        "POST",
        "/b2_update_bucket",
        {"accountId": ACCOUNT_ID, "bucketId": "bucketId", "bucketType": "allPrivate"},
    )


def test_list_buckets_posts_account_id(mock_http: Mock) -> None:
    mock_http.request.return_value = load_fixture("list_buckets.json")

    response = list_buckets(mock_http, ACCOUNT_ID)

    mock_http.request.assert_called_once_with(
        "POST", "/b2_list_buckets", {"accountId": ACCOUNT_ID}
    )
    assert len(response["buckets"]) == 3


def test_delete_bucket_posts_account_and_bucket_id(mock_http: Mock) -> None:
    mock_http.request.return_value = load_fixture("delete_bucket.json")

    delete_bucket(mock_http, ACCOUNT_ID, "bucketId")

    mock_http.request.assert_called_once_with(
        "POST", "/b2_delete_bucket", {"accountId": ACCOUNT_ID, "bucketId": "bucketId"}
    )

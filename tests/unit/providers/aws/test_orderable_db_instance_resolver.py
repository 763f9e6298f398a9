"""Tests for the RDS orderable DB instance resolver."""

from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError

from awsdata.providers.aws.domain.rds.orderable_db_instance import (
    OrderableDBInstanceCriteria,
    OrderableDBInstanceOption,
)
from awsdata.providers.aws.exceptions.aws_exceptions import (
    AmbiguousOptionsError,
    AWSError,
    AWSValidationError,
    NoMatchingOptionsError,
)
from awsdata.providers.aws.services.rds.orderable_db_instance_resolver import (
    OrderableDBInstanceResolver,
    filter_by_storage_type,
    select_option,
)
from tests.fixtures.rds_options import DESCRIBE_OPERATION, make_option, page


def _option(instance_class, **kwargs):
    return OrderableDBInstanceOption.model_validate(make_option(instance_class, **kwargs))


@pytest.mark.unit
class TestSelectOption:
    """Selection rules applied to the retained options."""

    def test_single_option_is_selected(self):
        option = _option("db.t2.small")

        assert select_option([option]) is option

    def test_empty_options_raise_no_match(self):
        with pytest.raises(NoMatchingOptionsError) as exc_info:
            select_option([], criteria={"engine": "mysql"})

        assert "no RDS Orderable DB Instance options found" in str(exc_info.value)
        assert exc_info.value.criteria == {"engine": "mysql"}

    def test_multiple_options_without_preference_are_ambiguous(self):
        options = [_option("db.t2.small"), _option("db.t3.small"), _option("db.m5.large")]

        with pytest.raises(AmbiguousOptionsError) as exc_info:
            select_option(options)

        assert exc_info.value.candidates == ["db.t2.small", "db.t3.small", "db.m5.large"]
        for candidate in exc_info.value.candidates:
            assert candidate in str(exc_info.value)

    def test_preference_list_order_wins_over_result_order(self):
        options = [_option("db.t3.small"), _option("db.t2.small")]

        selected = select_option(options, ["db.xyz.xlarge", "db.t2.small", "db.t3.small"])

        assert selected.db_instance_class == "db.t2.small"

    def test_unmatched_preferences_with_multiple_options_are_ambiguous(self):
        options = [_option("db.t2.small"), _option("db.t3.small")]

        with pytest.raises(AmbiguousOptionsError):
            select_option(options, ["db.xyz.xlarge", "db.r5.large"])

    def test_unmatched_preferences_with_single_option_select_it(self):
        option = _option("db.t2.small")

        assert select_option([option], ["db.xyz.xlarge"]) is option

    def test_duplicate_class_uses_last_option_seen(self):
        first = _option("db.t2.small", engine_version="5.7.21")
        last = _option("db.t2.small", engine_version="5.7.22")

        selected = select_option([first, _option("db.t3.small"), last], ["db.t2.small"])

        assert selected is last

    def test_duplicate_class_without_preference_is_ambiguous(self):
        options = [_option("db.t2.small", engine_version="5.7.21"), _option("db.t2.small")]

        with pytest.raises(AmbiguousOptionsError) as exc_info:
            select_option(options)

        assert exc_info.value.candidates == ["db.t2.small", "db.t2.small"]


@pytest.mark.unit
class TestFilterByStorageType:
    """Client side storage type filter."""

    def test_no_filter_keeps_everything(self):
        options = [_option("db.t2.small", storage_type="gp2"), _option("db.t3.small")]

        assert filter_by_storage_type(options, None) == options

    def test_exact_match_only(self):
        standard = _option("db.t3.small", storage_type="standard")
        options = [_option("db.t2.small", storage_type="gp2"), standard]

        assert filter_by_storage_type(options, "standard") == [standard]

    def test_match_is_case_sensitive(self):
        options = [_option("db.t2.small", storage_type="Standard")]

        assert filter_by_storage_type(options, "standard") == []


@pytest.mark.unit
@pytest.mark.aws
class TestOrderableDBInstanceResolver:
    """Resolver behaviour against stubbed RDS responses."""

    def test_single_record_is_returned_unchanged(self, aws_client, rds_stubber):
        raw = make_option("db.t2.small")
        rds_stubber.add_response(DESCRIBE_OPERATION, page([raw]), {"Engine": "mysql"})

        selected = OrderableDBInstanceResolver(aws_client).resolve(
            OrderableDBInstanceCriteria(engine="mysql")
        )

        assert selected == OrderableDBInstanceOption.model_validate(raw)
        assert selected.availability_zones == ("us-east-1a", "us-east-1b")
        rds_stubber.assert_no_pending_responses()

    def test_only_supplied_criteria_are_sent(self, aws_client, rds_stubber):
        rds_stubber.add_response(
            DESCRIBE_OPERATION,
            page([make_option("db.t2.small")]),
            {
                "Engine": "mysql",
                "EngineVersion": "5.7.22",
                "LicenseModel": "general-public-license",
                "Vpc": False,
            },
        )
        criteria = OrderableDBInstanceCriteria(
            engine="mysql",
            engine_version="5.7.22",
            license_model="general-public-license",
            vpc=False,
            storage_type="standard",
            preferred_db_instance_classes=("db.t2.small",),
        )

        selected = OrderableDBInstanceResolver(aws_client).resolve(criteria)

        assert selected.db_instance_class == "db.t2.small"
        rds_stubber.assert_no_pending_responses()

    def test_follows_marker_across_pages(self, aws_client, rds_stubber):
        rds_stubber.add_response(
            DESCRIBE_OPERATION,
            page([make_option("db.t2.micro"), make_option("db.t3.small")], marker="page-2"),
            {"Engine": "mysql"},
        )
        rds_stubber.add_response(
            DESCRIBE_OPERATION,
            page([make_option("db.t2.small")], marker="page-3"),
            {"Engine": "mysql", "Marker": "page-2"},
        )
        rds_stubber.add_response(
            DESCRIBE_OPERATION,
            page([make_option("db.m5.large")]),
            {"Engine": "mysql", "Marker": "page-3"},
        )
        resolver = OrderableDBInstanceResolver(aws_client)

        options = resolver.fetch_options(OrderableDBInstanceCriteria(engine="mysql"))

        assert [option.db_instance_class for option in options] == [
            "db.t2.micro",
            "db.t3.small",
            "db.t2.small",
            "db.m5.large",
        ]
        rds_stubber.assert_no_pending_responses()

    def test_preference_resolves_across_pages(self, aws_client, rds_stubber):
        rds_stubber.add_response(
            DESCRIBE_OPERATION,
            page([make_option("db.t3.small")], marker="next"),
            {"Engine": "mysql", "EngineVersion": "5.7.22"},
        )
        rds_stubber.add_response(
            DESCRIBE_OPERATION,
            page([make_option("db.t2.small")]),
            {"Engine": "mysql", "EngineVersion": "5.7.22", "Marker": "next"},
        )
        criteria = OrderableDBInstanceCriteria(
            engine="mysql",
            engine_version="5.7.22",
            preferred_db_instance_classes=("db.xyz.xlarge", "db.t2.small", "db.t3.small"),
        )

        selected = OrderableDBInstanceResolver(aws_client).resolve(criteria)

        assert selected.db_instance_class == "db.t2.small"

    def test_storage_type_filter_runs_before_ambiguity_check(self, aws_client, rds_stubber):
        rds_stubber.add_response(
            DESCRIBE_OPERATION,
            page(
                [
                    make_option("db.t2.small", storage_type="gp2"),
                    make_option("db.t2.small", storage_type="standard"),
                    make_option("db.t3.small", storage_type="gp2"),
                ]
            ),
            {"Engine": "mysql", "DBInstanceClass": "db.t2.small"},
        )
        criteria = OrderableDBInstanceCriteria(
            engine="mysql", db_instance_class="db.t2.small", storage_type="standard"
        )

        selected = OrderableDBInstanceResolver(aws_client).resolve(criteria)

        assert selected.storage_type == "standard"
        assert selected.db_instance_class == "db.t2.small"

    def test_storage_type_filter_can_leave_no_match(self, aws_client, rds_stubber):
        rds_stubber.add_response(
            DESCRIBE_OPERATION,
            page([make_option("db.t2.small", storage_type="gp2")]),
            {"Engine": "mysql"},
        )
        criteria = OrderableDBInstanceCriteria(engine="mysql", storage_type="standard")

        with pytest.raises(NoMatchingOptionsError) as exc_info:
            OrderableDBInstanceResolver(aws_client).resolve(criteria)

        assert exc_info.value.criteria == {"engine": "mysql", "storage_type": "standard"}

    def test_empty_result_raises_no_match(self, aws_client, rds_stubber):
        rds_stubber.add_response(DESCRIBE_OPERATION, page([]), {"Engine": "oracle-ee"})

        with pytest.raises(NoMatchingOptionsError):
            OrderableDBInstanceResolver(aws_client).resolve(
                OrderableDBInstanceCriteria(engine="oracle-ee")
            )

    def test_ambiguous_result_names_every_candidate(self, aws_client, rds_stubber):
        rds_stubber.add_response(
            DESCRIBE_OPERATION,
            page([make_option("db.t2.small"), make_option("db.t3.small")]),
            {"Engine": "mysql"},
        )

        with pytest.raises(AmbiguousOptionsError) as exc_info:
            OrderableDBInstanceResolver(aws_client).resolve(
                OrderableDBInstanceCriteria(engine="mysql")
            )

        assert exc_info.value.candidates == ["db.t2.small", "db.t3.small"]

    def test_client_error_is_converted_and_chained(self, aws_client, rds_stubber):
        rds_stubber.add_client_error(
            DESCRIBE_OPERATION,
            service_error_code="InvalidParameterValue",
            service_message="Invalid engine",
            http_status_code=400,
            expected_params={"Engine": "nope"},
        )

        with pytest.raises(AWSValidationError) as exc_info:
            OrderableDBInstanceResolver(aws_client).resolve(
                OrderableDBInstanceCriteria(engine="nope")
            )

        assert "error reading RDS orderable DB instance options" in str(exc_info.value)
        assert exc_info.value.error_code == "InvalidParameterValue"
        assert isinstance(exc_info.value.__cause__, ClientError)

    def test_client_error_on_later_page_returns_no_partial_result(self, aws_client, rds_stubber):
        rds_stubber.add_response(
            DESCRIBE_OPERATION,
            page([make_option("db.t2.small")], marker="next"),
            {"Engine": "mysql"},
        )
        rds_stubber.add_client_error(
            DESCRIBE_OPERATION,
            service_error_code="InternalFailure",
            http_status_code=500,
            expected_params={"Engine": "mysql", "Marker": "next"},
        )

        with pytest.raises(AWSError):
            OrderableDBInstanceResolver(aws_client).resolve(
                OrderableDBInstanceCriteria(engine="mysql")
            )

    def test_iter_options_is_lazy(self):
        paginator = Mock()
        paginator.paginate.return_value = iter(
            [
                page([make_option("db.t2.small"), None]),
                page([make_option("db.t3.small")]),
            ]
        )
        aws_client = Mock()
        aws_client.rds_client.get_paginator.return_value = paginator
        resolver = OrderableDBInstanceResolver(aws_client)

        options = resolver.iter_options(OrderableDBInstanceCriteria(engine="mysql"))

        aws_client.rds_client.get_paginator.assert_not_called()
        assert [option.db_instance_class for option in options] == ["db.t2.small", "db.t3.small"]
        aws_client.rds_client.get_paginator.assert_called_once_with(DESCRIBE_OPERATION)
        paginator.paginate.assert_called_once_with(Engine="mysql")

"""
Tests for custom exceptions.
"""

import pytest

from wayfinder.core.exceptions import GraphOperationError, InvalidHandleError, NoPathFoundError
from wayfinder.core.search.models import PathValidationError


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


@pytest.mark.parametrize("error_class", [InvalidHandleError, NoPathFoundError])
def test_graph_errors_share_base(error_class):
    """Test that handle and path errors are graph operation errors."""
    error = error_class("test message")

    assert isinstance(error, GraphOperationError)
    assert str(error) == "Graph Operation Error: test message"


def test_path_validation_error_is_separate():
    """Test that validation failures are not graph operation errors."""
    assert not issubclass(PathValidationError, GraphOperationError)

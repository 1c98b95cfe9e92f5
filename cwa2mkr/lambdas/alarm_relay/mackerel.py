from json import dumps

import requests
from aws_lambda_powertools import Logger

from cwa2mkr.core import constants
from cwa2mkr.core.exceptions import SubmissionError
from cwa2mkr.core.types import CheckReport

logger = Logger(service=__name__)


def post_checks_report(
    api_key: str,
    reports: list[CheckReport],
    session: requests.Session | None = None,
) -> None:
    """Post given check reports to Mackerel in a single request.

    Any status code of 400 or above, or a failure to complete the request,
    raises a `SubmissionError`. Nothing is retried.
    """
    body = dumps({"reports": reports})
    headers = {
        "Content-Type": "application/json",
        constants.API_KEY_HEADER: api_key,
    }
    post = session.post if session is not None else requests.post

    try:
        with post(
            constants.CHECK_REPORT_ENDPOINT, data=body, headers=headers, stream=True
        ) as response:
            if (status := response.status_code) >= 400:
                try:
                    text = response.text
                except requests.RequestException as e:
                    raise SubmissionError(
                        f"failed to read response body: status code {status} {e}",
                        status_code=status,
                    ) from e
                raise SubmissionError(
                    f"failed to post: status code {status} {text}",
                    status_code=status,
                    body=text,
                )
    except requests.RequestException as e:
        raise SubmissionError(f"failed to post: {e}") from e

    logger.debug("Posted %d check reports, status code %d", len(reports), status)

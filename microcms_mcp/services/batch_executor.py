# Batch Executor Service
"""Creates many content items in one run, isolating failures per item."""

import asyncio
import logging
from typing import Any, Dict, List, Sequence, Tuple, Union

from microcms_mcp.exceptions import ApiError, ItemError, MicroCMSError
from microcms_mcp.models.content import BatchItemOutcome, BatchMethod, BatchReport
from microcms_mcp.services.microcms_client import MicroCMSClient

logger = logging.getLogger("microcms.services.batch_executor")

ID_FIELD = "id"


def _split_identifier(index: int, item: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """Separate the content ID from the rest of a PUT item."""
    content_id = item.get(ID_FIELD)
    if content_id is None or content_id == "" or isinstance(content_id, (dict, list, bool)):
        raise ItemError(
            index,
            f"Item {index} has no usable '{ID_FIELD}' field; method 'put' requires one",
        )
    payload = {key: value for key, value in item.items() if key != ID_FIELD}
    return str(content_id), payload


class BatchExecutor:
    """
    Runs a sequence of create operations against one endpoint.

    Items are processed in input order. A failing item is recorded and the
    run continues. With max_concurrency > 1 items are sent through a
    bounded worker pool; outcomes still come back in input order.
    """

    def __init__(self, client: MicroCMSClient, max_concurrency: int = 1):
        self.client = client
        self.max_concurrency = max(1, max_concurrency)

    async def run(
        self,
        endpoint: str,
        contents: Sequence[Dict[str, Any]],
        method: Union[BatchMethod, str] = BatchMethod.POST,
    ) -> BatchReport:
        """
        Create every item and collect the outcomes.

        Args:
            endpoint: API endpoint name
            contents: Items to create
            method: "post" (server-generated IDs) or "put" (IDs from items)

        Returns:
            BatchReport with one outcome per input item
        """
        method = BatchMethod(method)
        logger.info(
            f"Batch {method.value.upper()} of {len(contents)} items to {endpoint}"
        )

        if self.max_concurrency == 1:
            outcomes: List[BatchItemOutcome] = []
            for index, item in enumerate(contents):
                outcomes.append(await self._run_item(endpoint, index, item, method))
        else:
            semaphore = asyncio.Semaphore(self.max_concurrency)

            async def bounded(index: int, item: Dict[str, Any]) -> BatchItemOutcome:
                async with semaphore:
                    return await self._run_item(endpoint, index, item, method)

            outcomes = await asyncio.gather(
                *(bounded(index, item) for index, item in enumerate(contents))
            )

        report = BatchReport(endpoint=endpoint, method=method, results=tuple(outcomes))
        logger.info(
            f"Batch {method.value.upper()} to {endpoint} finished: "
            f"{report.succeeded} succeeded, {report.failed} failed"
        )
        return report

    async def _run_item(
        self,
        endpoint: str,
        index: int,
        item: Dict[str, Any],
        method: BatchMethod,
    ) -> BatchItemOutcome:
        """Create one item; failures become outcome records."""
        try:
            if method is BatchMethod.PUT:
                content_id, payload = _split_identifier(index, item)
                result = await self.client.put_content(endpoint, content_id, payload)
                # PUT responses may omit the ID
                result = dict(result) if isinstance(result, dict) else {}
                result[ID_FIELD] = content_id
            else:
                result = await self.client.create_content(endpoint, dict(item))
        except ApiError as e:
            logger.warning(f"Batch item {index} failed: {e}")
            return BatchItemOutcome(
                index=index,
                success=False,
                data=item,
                error=str(e),
                status_code=e.status_code,
            )
        except MicroCMSError as e:
            logger.warning(f"Batch item {index} failed: {e}")
            return BatchItemOutcome(index=index, success=False, data=item, error=str(e))
        except Exception as e:
            logger.exception(f"Batch item {index} failed unexpectedly: {e}")
            return BatchItemOutcome(
                index=index,
                success=False,
                data=item,
                error=f"Unexpected error: {str(e)}",
            )

        return BatchItemOutcome(index=index, success=True, data=result)

# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""Tests for outbound fax endpoints."""

from datetime import datetime

import httpx
import pytest
import respx

from interfax import (
    ApiException,
    FaxDocument,
    InterFAXError,
    ListOptions,
    SearchOptions,
    SendOptions,
    SortOrder,
)
from interfax.options import Resolution

FAX_RECORD = {
    "id": 279415116,
    "uri": "https://rest.interfax.net/outbound/faxes/279415116",
    "status": 0,
    "userId": "user",
    "pagesSent": 1,
    "completionTime": "2012-06-20T06:34:59",
    "remoteCSID": "43325433",
    "duration": 15,
    "priority": 2,
    "units": 1.0,
    "costPerUnit": 0.65,
    "attemptsMade": 1,
    "destinationFax": "0012345678",
    "pageResolution": "standard",
}


class TestFaxDocument:
    def test_needs_content_or_uri(self):
        with pytest.raises(ValueError):
            FaxDocument()
        with pytest.raises(ValueError):
            FaxDocument(content=b"x", uri="https://example.com/a.pdf")

    def test_from_bytes_guesses_media_type(self):
        document = FaxDocument.from_bytes(b"%PDF", "letter.pdf")
        assert document.media_type == "application/pdf"
        assert document.filename == "letter.pdf"

    def test_from_file(self, tmp_path):
        path = tmp_path / "note.txt"
        path.write_bytes(b"hello")

        document = FaxDocument.from_file(path)

        assert document.content == b"hello"
        assert document.media_type == "text/plain"

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FaxDocument.from_file(tmp_path / "missing.pdf")


class TestSendFax:
    @pytest.mark.asyncio
    @respx.mock
    async def test_send_single_document(self, interfax, base_url):
        route = respx.post(f"{base_url}/outbound/faxes").mock(
            return_value=httpx.Response(
                201, headers={"Location": f"{base_url}/outbound/faxes/279415116"}
            )
        )
        document = FaxDocument.from_bytes(b"%PDF-1.4", "letter.pdf")

        async with interfax:
            fax_id = await interfax.outbound.send_fax(
                "+11111111112",
                document,
                SendOptions(reference="invoice 7", resolution=Resolution.FINE),
            )

        assert fax_id == 279415116
        request = route.calls.last.request
        assert request.url.params["faxNumber"] == "+11111111112"
        assert request.url.params["reference"] == "invoice 7"
        assert request.url.params["resolution"] == "fine"
        assert request.headers["content-type"] == "application/pdf"
        assert request.content == b"%PDF-1.4"

    @pytest.mark.asyncio
    @respx.mock
    async def test_send_document_by_uri(self, interfax, base_url):
        route = respx.post(f"{base_url}/outbound/faxes").mock(
            return_value=httpx.Response(
                201, headers={"Location": f"{base_url}/outbound/faxes/5"}
            )
        )
        uri = f"{base_url}/outbound/documents/abc"

        async with interfax:
            fax_id = await interfax.outbound.send_fax(
                "+11111111112", FaxDocument.from_uri(uri)
            )

        assert fax_id == 5
        request = route.calls.last.request
        assert request.headers["content-location"] == uri
        assert request.content == b""

    @pytest.mark.asyncio
    @respx.mock
    async def test_send_multiple_documents(self, interfax, base_url):
        route = respx.post(f"{base_url}/outbound/faxes").mock(
            return_value=httpx.Response(
                201, headers={"Location": f"{base_url}/outbound/faxes/6"}
            )
        )
        uri = f"{base_url}/outbound/documents/abc"
        documents = [
            FaxDocument.from_bytes(b"%PDF-1.4", "cover.pdf"),
            FaxDocument.from_uri(uri),
        ]

        async with interfax:
            fax_id = await interfax.outbound.send_fax("+11111111112", documents)

        assert fax_id == 6
        request = route.calls.last.request
        media_type, _, boundary = request.headers["content-type"].partition(
            "; boundary="
        )
        assert media_type == "multipart/mixed"
        body = request.content
        assert body.count(f"--{boundary}\r\n".encode()) == 2
        assert body.endswith(f"--{boundary}--\r\n".encode())
        assert b"%PDF-1.4" in body
        assert f"Content-Location: {uri}".encode() in body
        assert body.index(b"%PDF-1.4") < body.index(b"Content-Location")

    @pytest.mark.asyncio
    async def test_send_without_documents(self, interfax):
        async with interfax:
            with pytest.raises(ValueError):
                await interfax.outbound.send_fax("+11111111112", [])

    @pytest.mark.asyncio
    @respx.mock
    async def test_send_without_location(self, interfax, base_url):
        respx.post(f"{base_url}/outbound/faxes").mock(
            return_value=httpx.Response(201)
        )

        async with interfax:
            with pytest.raises(InterFAXError, match="Location"):
                await interfax.outbound.send_fax(
                    "+11111111112", FaxDocument.from_bytes(b"x", "a.txt")
                )

    @pytest.mark.asyncio
    @respx.mock
    async def test_send_with_non_numeric_location(self, interfax, base_url):
        respx.post(f"{base_url}/outbound/faxes").mock(
            return_value=httpx.Response(
                201, headers={"Location": f"{base_url}/outbound/faxes/pending"}
            )
        )

        async with interfax:
            with pytest.raises(InterFAXError, match="numeric id"):
                await interfax.outbound.send_fax(
                    "+11111111112", FaxDocument.from_bytes(b"x", "a.txt")
                )

    @pytest.mark.asyncio
    @respx.mock
    async def test_send_rejected(self, interfax, base_url):
        respx.post(f"{base_url}/outbound/faxes").mock(
            return_value=httpx.Response(
                400,
                json={
                    "code": -1003,
                    "message": "Invalid fax number",
                    "moreInfo": "faxNumber must be in international format",
                },
            )
        )

        async with interfax:
            with pytest.raises(ApiException) as exc_info:
                await interfax.outbound.send_fax(
                    "12", FaxDocument.from_bytes(b"x", "a.txt")
                )

        assert exc_info.value.status_code == 400
        assert exc_info.value.error.code == -1003


class TestOutboundRecords:
    @pytest.mark.asyncio
    @respx.mock
    async def test_list(self, interfax, base_url):
        route = respx.get(f"{base_url}/outbound/faxes").mock(
            return_value=httpx.Response(200, json=[FAX_RECORD])
        )

        async with interfax:
            faxes = await interfax.outbound.list(
                ListOptions(limit=10, sort_order=SortOrder.DESCENDING)
            )

        assert len(faxes) == 1
        fax = faxes[0]
        assert fax.id == 279415116
        assert fax.remote_csid == "43325433"
        assert fax.completion_time == datetime(2012, 6, 20, 6, 34, 59)
        assert fax.delivered
        assert not fax.in_progress
        params = route.calls.last.request.url.params
        assert params["limit"] == "10"
        assert params["sortOrder"] == "desc"

    @pytest.mark.asyncio
    @respx.mock
    async def test_unknown_fields_are_kept(self, interfax, base_url):
        respx.get(f"{base_url}/outbound/faxes/1").mock(
            return_value=httpx.Response(200, json={"id": 1, "newField": "x"})
        )

        async with interfax:
            fax = await interfax.outbound.get(1)

        assert fax.model_extra == {"newField": "x"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_completed(self, interfax, base_url):
        route = respx.get(f"{base_url}/outbound/faxes/completed").mock(
            return_value=httpx.Response(200, json=[{"id": 1}, {"id": 2, "status": -2}])
        )

        async with interfax:
            faxes = await interfax.outbound.completed([1, 2])

        assert [fax.id for fax in faxes] == [1, 2]
        assert faxes[1].in_progress
        assert route.calls.last.request.url.params["ids"] == "1,2"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get(self, interfax, base_url):
        respx.get(f"{base_url}/outbound/faxes/279415116").mock(
            return_value=httpx.Response(200, json=FAX_RECORD)
        )

        async with interfax:
            fax = await interfax.outbound.get(279415116)

        assert fax.destination_fax == "0012345678"

    @pytest.mark.asyncio
    @respx.mock
    async def test_image(self, interfax, base_url):
        respx.get(f"{base_url}/outbound/faxes/1/image").mock(
            return_value=httpx.Response(200, content=b"II*\x00tiff")
        )

        async with interfax:
            image = await interfax.outbound.image(1)

        assert image == b"II*\x00tiff"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search(self, interfax, base_url):
        route = respx.get(f"{base_url}/outbound/search").mock(
            return_value=httpx.Response(200, json=[FAX_RECORD])
        )

        async with interfax:
            faxes = await interfax.outbound.search(
                SearchOptions(fax_number="0012345678", limit=1)
            )

        assert faxes[0].id == 279415116
        params = route.calls.last.request.url.params
        assert params["faxNumber"] == "0012345678"
        assert params["limit"] == "1"


class TestOutboundActions:
    @pytest.mark.asyncio
    @respx.mock
    async def test_cancel(self, interfax, base_url):
        route = respx.post(f"{base_url}/outbound/faxes/1/cancel").mock(
            return_value=httpx.Response(200)
        )

        async with interfax:
            result = await interfax.outbound.cancel(1)

        assert result == "OK"
        assert route.calls.last.request.content == b""

    @pytest.mark.asyncio
    @respx.mock
    async def test_cancel_unknown_fax(self, interfax, base_url):
        respx.post(f"{base_url}/outbound/faxes/1/cancel").mock(
            return_value=httpx.Response(
                404,
                json={"code": 404, "message": "Not Found", "moreInfo": "no such fax"},
            )
        )

        async with interfax:
            with pytest.raises(ApiException) as exc_info:
                await interfax.outbound.cancel(1)

        assert exc_info.value.status_code == 404
        assert exc_info.value.error.more_info == "no such fax"

    @pytest.mark.asyncio
    @respx.mock
    async def test_hide(self, interfax, base_url):
        respx.post(f"{base_url}/outbound/faxes/1/hide").mock(
            return_value=httpx.Response(200)
        )

        async with interfax:
            assert await interfax.outbound.hide(1) == "OK"

    @pytest.mark.asyncio
    @respx.mock
    async def test_resend_to_original_number(self, interfax, base_url):
        route = respx.post(f"{base_url}/outbound/faxes/1/resend").mock(
            return_value=httpx.Response(
                201, headers={"Location": f"{base_url}/outbound/faxes/2"}
            )
        )

        async with interfax:
            new_id = await interfax.outbound.resend(1)

        assert new_id == 2
        assert route.calls.last.request.url.query == b""

    @pytest.mark.asyncio
    @respx.mock
    async def test_resend_to_other_number(self, interfax, base_url):
        route = respx.post(f"{base_url}/outbound/faxes/1/resend").mock(
            return_value=httpx.Response(
                201, headers={"Location": f"{base_url}/outbound/faxes/3"}
            )
        )

        async with interfax:
            new_id = await interfax.outbound.resend(1, fax_number="+22222222222")

        assert new_id == 3
        assert route.calls.last.request.url.params["faxNumber"] == "+22222222222"

import pytest

from twirest.core.utils.exceptions import DecodeError
from twirest.modules.responses.enums.resource_kind import ResourceKind
from twirest.modules.responses.models.call import CallResponse
from twirest.modules.responses.models.queue import QueueMemberResponse
from twirest.modules.responses.services.xml_decoder import decode_resource, decode_response


class TestDecodeResponse:
    def test_decode_call(self, call_xml):
        response = decode_response(call_xml, http_status=200)

        assert response.ok
        assert response.kind is ResourceKind.CALL
        call = response.resource
        assert call.sid == "CAa346467ca321c71dbd5e12f627deb854"
        assert call.from_number == "+14158675309"
        assert call.to == "+14155551212"
        assert call.duration == "31"
        assert call.price == "-0.03000"
        assert call.parent_call_sid == ""
        assert call.answered_by == ""
        assert call.sub_resource_uris.recordings.endswith("/Recordings")

    def test_decode_list_preserves_order_and_page(self, calls_xml):
        response = decode_response(calls_xml, http_status=200)

        assert response.kind is ResourceKind.CALLS
        calls = response.resource
        assert [c.sid for c in calls.calls] == ["CA001", "CA002", "CA003"]
        assert calls.calls[2].duration == ""
        assert calls.page == 0
        assert calls.num_pages == 1
        assert calls.page_size == 50
        assert calls.total == 3
        assert calls.end == 2
        assert calls.uri == "/2010-04-01/Accounts/AC123/Calls"
        assert calls.first_page_uri == "/2010-04-01/Accounts/AC123/Calls?Page=0&PageSize=50"
        assert calls.next_page_uri == ""

    def test_decode_exception_normalizes_status(self, exception_xml):
        response = decode_response(exception_xml, http_status=404)

        assert not response.ok
        assert response.kind is ResourceKind.EXCEPTION
        exc = response.exception
        assert exc.code == 20404
        assert exc.status == "Not Found"
        assert exc.status_code == 404
        assert response.status.twilio == 20404

    def test_explicit_twilio_status_is_kept(self, exception_xml):
        response = decode_response(exception_xml, http_status=404, twilio_status=1)
        assert response.status.twilio == 1

    def test_exception_normalization_can_be_disabled(self, exception_xml, monkeypatch):
        from twirest.modules.responses.services import xml_decoder

        monkeypatch.setattr(xml_decoder.settings.decoder, "normalize_exceptions", False)
        exc = decode_response(exception_xml, http_status=404).exception
        assert exc.status == "404"
        assert exc.status_code == 0

    def test_decode_available_phone_numbers(self, available_phone_numbers_xml):
        response = decode_response(available_phone_numbers_xml)

        assert response.kind is ResourceKind.AVAILABLE_PHONE_NUMBERS
        numbers = response.resource
        assert numbers.uri == "/2010-04-01/Accounts/AC123/AvailablePhoneNumbers/US/Local"
        assert len(numbers.available_phone_numbers) == 2
        first, second = numbers.available_phone_numbers
        assert first.phone_number == "+15105647903"
        assert first.rate_center == "OKLD TRNID"
        assert (first.voice, first.sms, first.mms, first.fax) == ("true", "true", "false", "false")
        assert (second.voice, second.sms, second.mms, second.fax) == ("true", "false", "", "")

    def test_bare_resource_root(self):
        body = b"<Queue><Sid>QU1</Sid><CurrentSize>2</CurrentSize></Queue>"
        response = decode_response(body, http_status=200)
        assert response.kind is ResourceKind.QUEUE
        assert response.resource.current_size == "2"

    def test_legacy_sub_resource_uris_spelling(self):
        body = (
            b"<TwilioResponse><UsageRecords page='0'><UsageRecord><Category>calls</Category>"
            b"<SubResourceUris><Daily>/daily</Daily></SubResourceUris></UsageRecord>"
            b"</UsageRecords></TwilioResponse>"
        )
        record = decode_response(body).resource.usage_records[0]
        assert record.category == "calls"
        assert record.sub_resource_uris.daily == "/daily"

    def test_missing_sub_resource_uris_is_none(self):
        body = b"<TwilioResponse><Conference><Sid>CF1</Sid></Conference></TwilioResponse>"
        assert decode_response(body).resource.sub_resource_uris is None

    def test_empty_body(self):
        response = decode_response(b"", http_status=204)
        assert response.kind is None
        assert response.ok

    def test_none_body(self):
        assert decode_response(None, http_status=500).kind is None

    def test_unknown_resource_element(self):
        response = decode_response(b"<TwilioResponse><Transcription/></TwilioResponse>")
        assert response.kind is None
        assert response.populated_kinds() == []

    def test_unexpected_root(self):
        assert decode_response(b"<html><body>Bad Gateway</body></html>", http_status=502).kind is None

    def test_malformed_xml(self):
        with pytest.raises(DecodeError) as err:
            decode_response(b"<TwilioResponse><Call>", http_status=200)
        assert err.value.body.startswith(b"<TwilioResponse>")
        assert err.value.cause is not None

    def test_str_body(self):
        response = decode_response("<TwilioResponse><Message><Body>Olá</Body></Message></TwilioResponse>")
        assert response.resource.body == "Olá"

    @pytest.mark.parametrize(
        "tag",
        [kind.value for kind in ResourceKind if kind.has_xml_tag],
    )
    def test_at_most_one_resource_populated(self, tag):
        response = decode_response(f"<TwilioResponse><{tag}/></TwilioResponse>".encode())
        assert response.populated_kinds() == [ResourceKind(tag)]


class TestDecodeResource:
    def test_decode_single_record(self):
        member = decode_resource(
            b"<QueueMember><CallSid>CA1</CallSid><Position>1</Position><WaitTime>124</WaitTime></QueueMember>",
            QueueMemberResponse,
        )
        assert member.call_sid == "CA1"
        assert member.position == "1"
        assert member.wait_time == "124"
        assert member.date_enqueued == ""

    def test_whitespace_is_preserved(self):
        call = decode_resource(b"<Call><CallerName>  Jane  </CallerName></Call>", CallResponse)
        assert call.caller_name == "  Jane  "

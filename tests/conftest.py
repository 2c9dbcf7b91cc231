import os
import sys

# Set environment variables for testing
# These must be set before importing any module that instantiates Settings
os.environ.setdefault("TWIREST_API_ENVIRONMENT", "development")
os.environ.setdefault("TWIREST_LOG_LEVEL", "WARNING")
os.environ.setdefault("TWIREST_TWILIO_ERROR_DOCS_URL", "https://www.twilio.com/docs/errors")

# Ensure project root is in pythonpath
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest  # noqa: E402

CALL_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<TwilioResponse>
  <Call>
    <Sid>CAa346467ca321c71dbd5e12f627deb854</Sid>
    <DateCreated>Thu, 19 Aug 2010 00:12:15 +0000</DateCreated>
    <DateUpdated>Thu, 19 Aug 2010 00:12:15 +0000</DateUpdated>
    <ParentCallSid/>
    <AccountSid>AC5ef872f6da5a21de157d80997a64bd33</AccountSid>
    <To>+14155551212</To>
    <From>+14158675309</From>
    <PhoneNumberSid>PNd6b0e1e84f7b117332aed2fd2e5bbcab</PhoneNumberSid>
    <Status>completed</Status>
    <StartTime>Thu, 19 Aug 2010 00:12:16 +0000</StartTime>
    <EndTime>Thu, 19 Aug 2010 00:12:47 +0000</EndTime>
    <Duration>31</Duration>
    <Price>-0.03000</Price>
    <PriceUnit>USD</PriceUnit>
    <Direction>outbound-api</Direction>
    <AnsweredBy/>
    <ForwardedFrom/>
    <CallerName/>
    <Uri>/2010-04-01/Accounts/AC5ef872f6da5a21de157d80997a64bd33/Calls/CAa346467ca321c71dbd5e12f627deb854</Uri>
    <SubresourceUris>
      <Notifications>/2010-04-01/Accounts/AC5ef872f6da5a21de157d80997a64bd33/Calls/CAa346467ca321c71dbd5e12f627deb854/Notifications</Notifications>
      <Recordings>/2010-04-01/Accounts/AC5ef872f6da5a21de157d80997a64bd33/Calls/CAa346467ca321c71dbd5e12f627deb854/Recordings</Recordings>
    </SubresourceUris>
  </Call>
</TwilioResponse>
"""

CALLS_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<TwilioResponse>
  <Calls page="0" numpages="1" pagesize="50" total="3" start="0" end="2"
         uri="/2010-04-01/Accounts/AC123/Calls" firstpageuri="/2010-04-01/Accounts/AC123/Calls?Page=0&amp;PageSize=50"
         previouspageuri="" nextpageuri="" lastpageuri="/2010-04-01/Accounts/AC123/Calls?Page=0&amp;PageSize=50">
    <Call><Sid>CA001</Sid><Status>completed</Status><Duration>15</Duration></Call>
    <Call><Sid>CA002</Sid><Status>busy</Status><Duration>0</Duration></Call>
    <Call><Sid>CA003</Sid><Status>no-answer</Status></Call>
  </Calls>
</TwilioResponse>
"""

EXCEPTION_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<TwilioResponse>
  <RestException>
    <Code>20404</Code>
    <Message>The requested resource /2010-04-01/Accounts/AC123/Calls/CA999 was not found</Message>
    <MoreInfo>https://www.twilio.com/docs/errors/20404</MoreInfo>
    <Status>404</Status>
  </RestException>
</TwilioResponse>
"""

AVAILABLE_PHONE_NUMBERS_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<TwilioResponse>
  <AvailablePhoneNumbers uri="/2010-04-01/Accounts/AC123/AvailablePhoneNumbers/US/Local">
    <AvailablePhoneNumber>
      <FriendlyName>(510) 564-7903</FriendlyName>
      <PhoneNumber>+15105647903</PhoneNumber>
      <Lata>722</Lata>
      <RateCenter>OKLD TRNID</RateCenter>
      <Latitude>37.780000</Latitude>
      <Longitude>-122.380000</Longitude>
      <Region>CA</Region>
      <PostalCode>94703</PostalCode>
      <IsoCountry>US</IsoCountry>
      <AddressRequirements>none</AddressRequirements>
      <Beta>false</Beta>
      <Capabilities>
        <Voice>true</Voice>
        <SMS>true</SMS>
        <MMS>false</MMS>
        <Fax>false</Fax>
      </Capabilities>
    </AvailablePhoneNumber>
    <AvailablePhoneNumber>
      <FriendlyName>(510) 488-4379</FriendlyName>
      <PhoneNumber>+15104884379</PhoneNumber>
      <Capabilities>
        <Voice>true</Voice>
        <SMS>false</SMS>
      </Capabilities>
    </AvailablePhoneNumber>
  </AvailablePhoneNumbers>
</TwilioResponse>
"""


@pytest.fixture
def call_xml():
    return CALL_XML


@pytest.fixture
def calls_xml():
    return CALLS_XML


@pytest.fixture
def exception_xml():
    return EXCEPTION_XML


@pytest.fixture
def available_phone_numbers_xml():
    return AVAILABLE_PHONE_NUMBERS_XML

"""
Module: samples.py
Description: Canned endpoint values and service XML documents for tests.
"""

TEST_URL = "http://1234567890.mns.cn-hangzhou.aliyuncs.com"
TEST_HOST = "1234567890.mns.cn-hangzhou.aliyuncs.com"
ACCESS_KEY_ID = "testAccessKeyId"
ACCESS_KEY_SECRET = "testAccessKeySecret"

NS = 'xmlns="http://mns.aliyuncs.com/doc/v1/"'

SEND_MESSAGE_XML = (
    f'<?xml version="1.0" encoding="UTF-8"?><Message {NS}>'
    '<MessageId>5F290C926D472878-2-14D9529A8FA-200000001</MessageId>'
    '<MessageBodyMD5>C5DD56A39F5F7BB8B3337C6D11B6D8C7</MessageBodyMD5>'
    '</Message>'
)

RECEIVED_MESSAGE_XML = (
    f'<?xml version="1.0" encoding="UTF-8"?><Message {NS}>'
    '<MessageId>5fea7756-0ea4-451a-a703-a558b933e274</MessageId>'
    '<ReceiptHandle>1-ODU4OTkzNDU5My0xNDMyNzI3ODI3LTItOA==</ReceiptHandle>'
    '<MessageBodyMD5>fafb00f5732ab283681e124bf8747ed1</MessageBodyMD5>'
    '<MessageBody>This is a test message</MessageBody>'
    '<EnqueueTime>1250700979248</EnqueueTime>'
    '<NextVisibleTime>1250700799348</NextVisibleTime>'
    '<FirstDequeueTime>1250700779318</FirstDequeueTime>'
    '<DequeueCount>1</DequeueCount>'
    '<Priority>8</Priority>'
    '</Message>'
)

ERROR_XML = (
    f'<?xml version="1.0" encoding="UTF-8"?><Error {NS}>'
    '<Code>MessageNotExist</Code>'
    '<Message>Message not exist.</Message>'
    '<RequestId>5DB3A8D5F2E1A5C4B1E3D2F1</RequestId>'
    '<HostId>http://1234567890.mns.cn-hangzhou.aliyuncs.com</HostId>'
    '</Error>'
)



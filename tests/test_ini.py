import json

import pytest

from anttools.ini import decode, encode, to_json

INI_STR = """

;注释
aa=bb
[addr] 
#注释
ip = 127.0.0.1
port=9001
enable=true

\t[DBINFO]
\ttype=mysql
\tuser=root
\tpassword=password
[键]
呵呵=值

"""

EXPECTED = {
    "addr": {"ip": "127.0.0.1", "port": "9001", "enable": "true"},
    "DBINFO": {"type": "mysql", "user": "root", "password": "password"},
    "键": {"呵呵": "值"},
}


def test_decode():
    assert decode(INI_STR.encode()) == EXPECTED


def test_round_trip():
    assert decode(encode(EXPECTED)) == EXPECTED


def test_to_json():
    assert json.loads(to_json(INI_STR)) == EXPECTED


def test_no_section():
    with pytest.raises(ValueError):
        decode("a=b\n")


def test_encode_empty_and_bad_value():
    with pytest.raises(ValueError):
        encode({})
    with pytest.raises(TypeError):
        encode({"s": {"k": 1}})
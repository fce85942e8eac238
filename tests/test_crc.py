from vietqr.crc import crc16_ccitt, verify_crc


class TestCrc16Ccitt:
    def test_check_value(self):
        # CRC-16/CCITT-FALSE catalogue check value
        assert crc16_ccitt("123456789") == "29B1"

    def test_bytes_and_str_agree(self):
        assert crc16_ccitt(b"123456789") == crc16_ccitt("123456789")

    def test_non_ascii_hashed_per_character(self):
        # one code per character, not the two UTF-8 bytes of "\u00e1"
        assert crc16_ccitt("\u00e1") == crc16_ccitt(bytes([0xE1]))
        assert crc16_ccitt("Thanh to\u00e1n") == crc16_ccitt("Thanh to\u00e1n".encode("latin-1"))

    def test_empty_input_is_initial_value(self):
        assert crc16_ccitt("") == "FFFF"

    def test_uppercase_zero_padded(self):
        for data in ("A", "000201", "6304", "NAPAS0001"):
            result = crc16_ccitt(data)
            assert len(result) == 4
            assert result == result.upper()
            int(result, 16)


class TestVerifyCrc:
    def test_accepts_matching_checksum(self):
        body = "0002010102116304"
        assert verify_crc(body + crc16_ccitt(body))

    def test_lowercase_checksum_accepted(self):
        body = "0002010102116304"
        assert verify_crc(body + crc16_ccitt(body).lower())

    def test_rejects_tampered_body(self):
        body = "0002010102116304"
        crc = crc16_ccitt(body)
        assert not verify_crc("0002010102126304" + crc)

    def test_rejects_missing_crc_tag(self):
        assert not verify_crc("000201010211")
        assert not verify_crc("")

from typing import List, Optional

import chardet


class InputDecoder:
    """Decodes raw input bytes whose encoding the caller does not know."""

    COMMON_ENCODINGS = [
        ("UTF-8", "utf-8"),
        ("UTF-16", "utf-16"),
        ("EUC-KR (Korean)", "euc-kr"),
        ("CP949 (Korean, Windows)", "cp949"),
        ("ISO-2022-KR (Korean)", "iso-2022-kr"),
        ("Johab (Korean)", "johab"),
    ]

    def __init__(self, supported_encodings: Optional[List[str]] = None):
        self.supported_encodings = supported_encodings or [
            enc[1] for enc in self.COMMON_ENCODINGS
        ]

    def detect_encoding(self, data: bytes) -> str:
        if not data:
            return "utf-8"

        try:
            data.decode("utf-8")
            return "utf-8"
        except UnicodeDecodeError:
            pass

        result = chardet.detect(data)
        if result and result["encoding"]:
            encoding = result["encoding"].lower()
            if encoding in self.supported_encodings:
                return encoding

        try:
            data.decode("cp949")
            return "cp949"
        except UnicodeDecodeError:
            return "utf-8"

    def decode(self, data: bytes) -> str:
        if data.startswith(b"\xef\xbb\xbf"):
            return data[3:].decode("utf-8", errors="replace")
        return data.decode(self.detect_encoding(data), errors="replace")

import io

import olefile

# Streams of the MS-OFFCRYPTO container wrapping an encrypted OOXML package
_ENCRYPTION_STREAMS = ("EncryptionInfo", "EncryptedPackage")


def is_ooxml_encrypted(file_like: io.BytesIO) -> bool:
    """True if the stream is an OLE container holding an encrypted OOXML package."""
    file_like.seek(0)
    if not olefile.isOleFile(file_like):
        file_like.seek(0)
        return False

    file_like.seek(0)
    with olefile.OleFileIO(file_like) as ole:
        encrypted = any(ole.exists(stream) for stream in _ENCRYPTION_STREAMS)
    file_like.seek(0)
    return encrypted

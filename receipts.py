# receipts.py
import logging
from pathlib import Path
from typing import Optional, Union

from errors import PersistenceFailure
from models import Receipt

logger = logging.getLogger(__name__)

RECEIPT_SUFFIX = "_booking_receipt.txt"


def receipt_filename(guest_name: str) -> str:
    return f"{guest_name}{RECEIPT_SUFFIX}"


def save_receipt(guest_name: str, receipt: Union[Receipt, str],
                 directory: Optional[Union[str, Path]] = None) -> Path:
    """Write the receipt text to ``<guest_name>_booking_receipt.txt``.

    The file lands in ``directory`` (the working directory when omitted) and
    replaces any earlier receipt of the same name. A name carrying a path
    separator is refused. There is no retry; an ``OSError`` surfaces as
    :class:`PersistenceFailure`.
    """
    base = Path(directory or ".")
    path = base / receipt_filename(guest_name)
    # the guest name must stay a bare file name inside the receipt directory
    if Path(guest_name).name != guest_name:
        logger.error("Refusing receipt name outside %s: %r", base, guest_name)
        raise PersistenceFailure(path)
    text = receipt.render() if isinstance(receipt, Receipt) else receipt
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        logger.error("Could not write receipt %s: %s", path, e)
        raise PersistenceFailure(path, e) from e
    logger.info("Saved booking receipt to %s", path)
    return path

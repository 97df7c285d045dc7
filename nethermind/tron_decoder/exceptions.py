class TronDecoderError(Exception):
    """

    Base class for errors raised by the Tron transaction decoder

    """


class NotFoundError(TronDecoderError):
    """Raised when the full node cannot locate the requested transaction or contract"""


class TransactionNotFound(NotFoundError):
    """Raised when a transaction ID does not exist on the connected node"""


class ContractNotFound(NotFoundError):
    """Raised when a contract address does not exist, or has no ABI published on chain"""


class MissingContractAddress(TronDecoderError):
    """
    Raised when a transaction record does not target a smart contract.  Checked before any ABI is
    fetched or any bytes are decoded.
    """


class TronNodeError(TronDecoderError):
    """Raised when the remote node returns an HTTP error, or the connection to the node fails"""


class DecodingFailed(TronDecoderError):
    """

    Raised by the fetch & decode entry points.  Wraps the underlying exception, which is available
    through ``__cause__``.  Codec errors raised by the from-data entry points are never wrapped, and
    surface as :class:`eth_abi.exceptions.DecodingError`.

    """

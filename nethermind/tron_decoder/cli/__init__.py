import asyncio
import logging

import click

from nethermind.tron_decoder.cli.utils import (
    api_key_option,
    full_reason_option,
    group_options,
    node_url_option,
    verbose_option,
)

# isort: skip_file
# pylint: disable=too-many-arguments,import-outside-toplevel

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("tron_decoder").getChild("cli")


@click.group()
def tron_decoder_cli():
    """Command Line Interface for Decoding Tron Smart Contract Transactions"""


@tron_decoder_cli.command()
@click.argument("signature")
def selector(signature: str):
    """Prints the 4 byte selector of a function signature, ie 'transfer(address,uint256)'"""
    from nethermind.tron_decoder.decoding import compute_selector

    click.echo(compute_selector(signature))


@tron_decoder_cli.command()
@group_options(verbose_option)
@click.argument("abi_json", type=click.File("r"))
@click.argument("data")
def decode_input(abi_json, data: str, verbose: bool):
    """Decodes call data against the ABI in ABI_JSON"""
    from nethermind.tron_decoder.cli.utils import cli_logger_config, load_abi, to_json
    from nethermind.tron_decoder.decoding import TronTxDecoder

    cli_logger_config(root_logger, verbose)

    decoded = TronTxDecoder().decode_input_from_data(data, load_abi(abi_json))
    if decoded.method_name is None:
        logger.warning(f"Selector {data.removeprefix('0x')[:8]} not found in ABI")

    click.echo(to_json(decoded.to_dict()))


@tron_decoder_cli.command()
@group_options(verbose_option)
@click.argument("abi_json", type=click.File("r"))
@click.argument("data")
@click.argument("result")
def decode_output(abi_json, data: str, result: str, verbose: bool):
    """Decodes the RESULT bytes of the function called with DATA"""
    from nethermind.tron_decoder.cli.utils import cli_logger_config, load_abi, to_json
    from nethermind.tron_decoder.decoding import TronTxDecoder

    cli_logger_config(root_logger, verbose)

    decoded = TronTxDecoder().decode_result_from_data(data, result, load_abi(abi_json))
    click.echo(to_json(decoded.to_dict()))


@tron_decoder_cli.command()
@group_options(full_reason_option)
@click.argument("status")
@click.argument("result")
def revert(status: str, result: str, full_reason: bool):
    """Extracts the revert reason from the RESULT bytes of a transaction with STATUS"""
    from nethermind.tron_decoder.cli.utils import to_json
    from nethermind.tron_decoder.decoding import decode_revert_message

    click.echo(to_json(decode_revert_message(status, result, full_reason).to_dict()))


@tron_decoder_cli.command()
@group_options(node_url_option, api_key_option, full_reason_option, verbose_option)
@click.argument("tx_id")
def decode_tx(tx_id: str, node_url: str, api_key: str | None, full_reason: bool, verbose: bool):
    """Fetches a transaction from a full node, and decodes its input, result, and revert reason"""
    from nethermind.tron_decoder.cli.utils import cli_logger_config, to_json
    from nethermind.tron_decoder.client import TronNodeClient, get_contract_call, get_contract_ret
    from nethermind.tron_decoder.decoding import TronTxDecoder
    from nethermind.tron_decoder.exceptions import TronDecoderError
    from nethermind.tron_decoder.types.decoding import method_call_failed

    cli_logger_config(root_logger, verbose)
    decoder = TronTxDecoder()

    async def _decode_tx() -> dict:
        async with TronNodeClient(node_url, api_key=api_key) as client:
            transaction = await client.get_transaction(tx_id)
            data, contract_address = get_contract_call(transaction)
            encoded_result = await client.get_hex_encoded_result(tx_id)

            output: dict = {
                "revert": decoder.decode_revert_message_from_transaction(
                    transaction, encoded_result, full_reason
                ).to_dict()
            }
            if method_call_failed(get_contract_ret(transaction)):
                # Failed calls do not return ABI encoded results
                logger.info(f"Transaction {tx_id} failed.  Skipping input & result decoding")
                return output

            abi = await client.get_contract_abi(contract_address)
            output["input"] = decoder.decode_input_from_data(data, abi).to_dict()
            output["output"] = decoder.decode_result_from_data(data, encoded_result, abi).to_dict()
            return output

    try:
        decoded = asyncio.run(_decode_tx())
    except TronDecoderError as e:
        logger.error(e)
        raise click.exceptions.Exit(1)

    click.echo(to_json(decoded))

import logging
from pathlib import Path

from evm_chainlist import Chains, UnsupportedChainError
from evm_chainlist.factory import load_metadata

DATA_DIR = Path(__file__).parent.parent / "tests" / "data"


def main():
    logging.basicConfig(level=logging.DEBUG)

    chains = Chains(
        load_metadata(DATA_DIR),
        indexes=["shortName", "nativeCurrency.symbol"],
        lists={"l2": ["oeth", 137]},
    )

    for chain in chains.global_chain_list:
        status = "testnet" if chain.is_testnet() else chain.status
        print(f"{chain.chain_id:>6} {chain.name:<20} {status}")

    print(chains.get_chain("matic"))
    print(chains.get_chain("ETH"))  # lowest chain ID wins
    print(chains.support("l2", ["OP Mainnet", "0x89"]))

    try:
        chains.support_or_throw("l2", [10, 1])
    except UnsupportedChainError as exc:
        print(exc)


if __name__ == "__main__":
    main()

"""Main CLI entry point"""

import sys
import argparse

from ..chains import get_chain_family, supported_path_types
from ..core.config import Config
from ..core.exceptions import ErrorKind
from ..core.log import configure_logging
from ..core.storage import FileKeyValueStore, WalletStore
from ..operations.session import WalletSession
from ..utils.display import mask_secret

# User-facing copy per failure kind; None falls back to the error text
ERROR_MESSAGES = {
    ErrorKind.UNSUPPORTED_PATH_TYPE: "Unsupported path type.",
    ErrorKind.INVALID_MNEMONIC: "Invalid recovery phrase. Please try again.",
    ErrorKind.NO_MNEMONIC_AVAILABLE: "No mnemonic found. Please generate a wallet first.",
    ErrorKind.NO_CHAIN_SELECTED: "No chain selected. Pass --chain to generate.",
    ErrorKind.DERIVATION_FAILED: None,
    ErrorKind.INVALID_STATE: None,
    ErrorKind.INDEX_OUT_OF_RANGE: None,
    ErrorKind.STORAGE_FAILED: None,
    ErrorKind.CONFIG_INVALID: None,
}


class CommandError(Exception):
    """Intent failed; message is already user-facing"""
    pass


def open_session(args):
    """Build a session on the configured store and hydrate it"""
    config = Config(store_dir=getattr(args, "store_dir", None))
    store = WalletStore(FileKeyValueStore(config.store_dir))
    session = WalletSession(store, config=config)
    check(session.hydrate())
    return session


def check(result):
    """Return the intent value, or raise CommandError with a user-facing message"""
    if result.ok:
        return result.value
    message = ERROR_MESSAGES.get(result.kind) or result.message
    if result.kind is ErrorKind.DERIVATION_FAILED:
        message = f"Failed to generate wallet due to {result.error.cause}. Please try again."
    raise CommandError(message)


def confirm(prompt, assume_yes=False):
    """Ask for a y/N confirmation on stdin"""
    if assume_yes:
        return True
    answer = input(f"{prompt} [y/N]: ").strip().lower()
    return answer in ("y", "yes")


def print_wallet(session, index, wallet, reveal=False):
    visible = reveal or session.visibility[index]
    print(f"\nWallet {index + 1} (account {wallet.account_index}):")
    print(f"  Path:        {wallet.derivation_path}")
    print(f"  Public Key:  {wallet.public_key}")
    print(f"  Private Key: {mask_secret(wallet.private_key, visible)}")


def cmd_chains(args):
    """List supported chains"""
    for path_type in supported_path_types():
        print(f"  {path_type:>4}  {get_chain_family(path_type).name}")


def cmd_generate(args):
    """Select a chain and derive the first wallet"""
    session = open_session(args)
    check(session.select_chain(args.chain))
    wallet = check(session.generate_initial(args.mnemonic or ""))

    print("=" * 60)
    print(f"{session.chain_name.upper()} WALLET GENERATED")
    print("=" * 60)
    print(f"\nRecovery Phrase ({len(session.mnemonic_words)} words):")
    print(f"  {' '.join(session.mnemonic_words)}\n")
    print("WARNING: Store this phrase securely and NEVER share it!")
    print("=" * 60)
    print_wallet(session, len(session.wallets) - 1, wallet)
    print(f"\nSaved to {session.config.store_dir}", file=sys.stderr)


def cmd_add(args):
    """Derive the next wallet from the stored mnemonic"""
    session = open_session(args)
    wallet = check(session.add_wallet())
    print_wallet(session, len(session.wallets) - 1, wallet)


def cmd_list(args):
    """List stored wallets"""
    session = open_session(args)
    if not session.wallets:
        print("No wallets stored.")
        return

    print(f"{session.chain_name} Wallet")
    print("-" * 60)
    for index, wallet in enumerate(session.wallets):
        print_wallet(session, index, wallet, reveal=args.reveal)


def cmd_show_mnemonic(args):
    """Print the stored recovery phrase"""
    session = open_session(args)
    phrase = check(session.copy_text("mnemonic"))
    for i, word in enumerate(phrase.split(" "), 1):
        print(f"  {i:>2}. {word}")


def cmd_delete(args):
    """Delete one wallet after confirmation"""
    session = open_session(args)
    index = args.index - 1
    if not 0 <= index < len(session.wallets):
        raise CommandError(f"No wallet {args.index} (have {len(session.wallets)})")
    if not confirm(f"Delete wallet {args.index}? This cannot be undone.", args.yes):
        print("Cancelled.")
        return
    removed = check(session.delete_wallet(index))
    print(f"Wallet deleted successfully! ({removed.derivation_path})")


def cmd_clear(args):
    """Delete every wallet and the mnemonic after confirmation"""
    session = open_session(args)
    if not confirm("Delete all wallets and keys from local storage? This cannot be undone.", args.yes):
        print("Cancelled.")
        return
    count = check(session.clear_all())
    print(f"All wallets cleared ({count} removed).")


def cmd_copy(args):
    """Print one raw value, for piping into a clipboard tool"""
    session = open_session(args)
    index = args.index - 1 if args.index is not None else None
    if args.target != "mnemonic" and index is None:
        raise CommandError("A wallet index is required for public/private keys")
    sys.stdout.write(check(session.copy_text(args.target, index)))
    if sys.stdout.isatty():
        sys.stdout.write("\n")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="hd-wallet",
        description="HD Wallet - Derive Solana and Ethereum wallets from one recovery phrase",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""examples:
  hd-wallet generate --chain 501                       # New Solana wallet, new phrase
  hd-wallet generate --chain 60 --mnemonic "word ..."  # Import phrase, Ethereum
  hd-wallet add                                        # Next account from the phrase
  hd-wallet list --reveal                              # Show private keys
  hd-wallet copy public 1 | pbcopy                     # Copy a key

configuration:
  HD_WALLET_HOME       Storage directory (default ~/.hd-wallet), also read from .env
  HD_WALLET_LOG_LEVEL  Logging level (default WARNING)

SECURITY: keys and phrase are stored as plaintext JSON.
""",
    )
    parser.add_argument("--store-dir", help="Storage directory (overrides HD_WALLET_HOME)")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    chains_parser = subparsers.add_parser("chains", help="List supported chains")
    chains_parser.set_defaults(func=cmd_chains)

    gen_parser = subparsers.add_parser("generate", help="Generate the first wallet")
    gen_parser.add_argument("--chain", required=True, choices=supported_path_types(),
                            help="BIP44 path type (501 Solana, 60 Ethereum)")
    gen_parser.add_argument("--mnemonic", help="Existing 12-word recovery phrase to import")
    gen_parser.set_defaults(func=cmd_generate)

    add_parser = subparsers.add_parser("add", help="Add a wallet from the stored phrase")
    add_parser.set_defaults(func=cmd_add)

    list_parser = subparsers.add_parser("list", help="List wallets")
    list_parser.add_argument("--reveal", action="store_true", help="Show private keys")
    list_parser.set_defaults(func=cmd_list)

    mnemonic_parser = subparsers.add_parser("show-mnemonic", help="Show the recovery phrase")
    mnemonic_parser.set_defaults(func=cmd_show_mnemonic)

    delete_parser = subparsers.add_parser("delete", help="Delete a wallet")
    delete_parser.add_argument("index", type=int, help="Wallet number (1-based, as listed)")
    delete_parser.add_argument("--yes", action="store_true", help="Skip confirmation")
    delete_parser.set_defaults(func=cmd_delete)

    clear_parser = subparsers.add_parser("clear", help="Delete all wallets and the phrase")
    clear_parser.add_argument("--yes", action="store_true", help="Skip confirmation")
    clear_parser.set_defaults(func=cmd_clear)

    copy_parser = subparsers.add_parser("copy", help="Print a raw value for the clipboard")
    copy_parser.add_argument("target", choices=["mnemonic", "public", "private"])
    copy_parser.add_argument("index", type=int, nargs="?", help="Wallet number (1-based)")
    copy_parser.set_defaults(func=cmd_copy)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        configure_logging(Config().log_level)
        args.func(args)
    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

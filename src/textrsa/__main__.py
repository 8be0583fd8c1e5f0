"""The Command Line Interface for the utility.

Every integer payload (ciphertexts, signatures, blinded messages, blinding factors) travels as base64 of its
fixed-length big-endian encoding, sized to the key modulus.

Typical usage example:

    textrsa keygen -P key -p key.pub
    OR
    python -m textrsa sign -P key --message "Hi there!"
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import math
import pathlib
import sys

import textrsa
from textrsa import rsa

pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-p", type=pathlib.Path, required=True, help="Location of the public key file.")
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key", "-P", type=pathlib.Path, required=True, help="Location of the private key file.")
raw = argparse.ArgumentParser(add_help=False)
raw.add_argument("--raw", "-r", action="store_true", help="Use the message bytes as representative, not their SHA-256.")

corep = argparse.ArgumentParser(prog="textrsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {textrsa.__version__}")
corep.add_argument("--verbose", action="store_true", help="Enable debug logging")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands", required=True)

keygen = commands.add_parser("keygen", parents=[privkey, pubkey], help="Key generation utility.")
keygen.add_argument("--overwrite", "-o", action="store_true", help="Overwrite destination files if they exist.")
keygen.add_argument("--max-attempts", type=int, help="Give up after this many prime candidates. Unbounded if omitted.")

encrypt = commands.add_parser("encrypt", parents=[pubkey], help="Encryption utility.")
encrypt.add_argument("--message", "-m", required=True, help="UTF-8 text to encrypt.")
decrypt = commands.add_parser("decrypt", parents=[privkey], help="Decryption utility.")
decrypt.add_argument("--message", "-m", required=True, help="Base64 ciphertext to decrypt.")

sign = commands.add_parser("sign", parents=[privkey, raw], help="Signing utility.")
payload = sign.add_mutually_exclusive_group(required=True)
payload.add_argument("--message", "-m", help="UTF-8 text to sign.")
payload.add_argument("--blinded", "-b", help="Base64 blinded message to sign on behalf of a requester.")

verify = commands.add_parser("verify", parents=[pubkey, raw], help="Signature verification utility.")
verify.add_argument("--message", "-m", required=True, help="UTF-8 text the signature covers.")
verify.add_argument("--signature", "-S", required=True, help="Base64 signature to validate.")

blind = commands.add_parser("blind", parents=[pubkey], help="Blind the SHA-256 digest of a message for signing.")
blind.add_argument("--message", "-m", required=True, help="UTF-8 text to obtain a blind signature on.")
blind.add_argument("--factor", "-f", help="Base64 blinding factor. Drawn at random if omitted.")

unblind = commands.add_parser("unblind", parents=[pubkey], help="Unblind a signature on a blinded message.")
unblind.add_argument("--signature", "-S", required=True, help="Base64 signature on the blinded message.")
unblind.add_argument("--factor", "-f", required=True, help="Base64 blinding factor used in blinding.")


def representative(message: str, use_raw: bool) -> int:
    """Maps the text message to the integer actually signed."""
    encoded = message.encode("utf-8")
    if use_raw:
        return rsa.bytes_to_integer(encoded)
    return rsa.sha256_representative(encoded)


def main(argv: list[str] | None = None):
    """Core Command Line Interface"""
    args = corep.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    match args.subcommand:
        case "keygen":
            if (args.private_key.exists() or args.public_key.exists()) and not args.overwrite:
                print("Destination private or public key already exists!")
                sys.exit(1)
            rpk = rsa.RSAPrivKey.generate(max_attempts=args.max_attempts)
            rpk.export(args.private_key)
            rpk.pub.export(args.public_key)
            print("Key pair generated!")
        case "encrypt":
            rpu = rsa.RSAPubKey.import_key(args.public_key)
            ciph = rpu.encrypt(rsa.bytes_to_integer(args.message.encode("utf-8")))
            print(rsa.b64_enc(ciph, rpu.bsize))
        case "decrypt":
            rpk = rsa.RSAPrivKey.import_key(args.private_key)
            clear = rpk.decrypt(rsa.b64_dec(args.message))
            print(rsa.integer_to_bytes(clear, rpk.bsize).lstrip(b"\x00").decode("utf-8"))
        case "sign":
            rpk = rsa.RSAPrivKey.import_key(args.private_key)
            if args.blinded is not None:
                target = rsa.b64_dec(args.blinded)
            else:
                target = representative(args.message, args.raw)
            print(rsa.b64_enc(rpk.sign(target), rpk.bsize))
        case "verify":
            rpu = rsa.RSAPubKey.import_key(args.public_key)
            if not rpu.verify(representative(args.message, args.raw), rsa.b64_dec(args.signature)):
                print("Signature Verification Failed!")
                sys.exit(1)
            print("Signature Verified!")
        case "blind":
            rpu = rsa.RSAPubKey.import_key(args.public_key)
            if args.factor is None:
                factor = rsa.generate_blinding_factor(rpu.mod)
            else:
                factor = rsa.b64_dec(args.factor)
                if not 1 < factor < rpu.mod or math.gcd(factor, rpu.mod) != 1:
                    print("Blinding factor must be in range [2, n-1] and coprime to the modulus!")
                    sys.exit(1)
            blinded = rpu.blind(representative(args.message, False), factor)
            print(rsa.b64_enc(blinded, rpu.bsize))
            print(rsa.b64_enc(factor, rpu.bsize))
        case "unblind":
            rpu = rsa.RSAPubKey.import_key(args.public_key)
            signature = rpu.unblind(rsa.b64_dec(args.signature), rsa.b64_dec(args.factor))
            print(rsa.b64_enc(signature, rpu.bsize))


if __name__ == "__main__":
    main()

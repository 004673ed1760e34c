"""Address test vectors (BIP173, BIP350)."""

# Address of Andreas Antonopoulos; the official BIP21 vectors use an invalid one.
ANDREAS = "1andreas3batLhQa2FawWjeyjCqyBzypd"
P2SH_ADDRESS = "3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy"
SEGWIT_ADDRESS = "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"
SEGWIT_PROGRAM = "751e76e8199196d454941c45d1b3a323f1433bd6"
TAPROOT_ADDRESS = "bc1p0xlxvlhemja6c4dqv22uapctqupfhlxm9h8z3k2e72q4k9hcz7vqzk5jj0"
TESTNET_SEGWIT_ADDRESS = "tb1qrp33g0q5c5txsp9arysrx4k6zdkfs4nce4xj0gdcccefvpysxf3q0sl5k7"

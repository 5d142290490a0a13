"""
Static token catalog for supported networks.

Tokens are declared in priority order: path generation takes bounded
prefixes of each category, so the order below decides which tokens a
strategy reaches first.
"""

from typing import Final

from triarb.config.constants import (
    ARBITRUM_RPC_URL,
    POLYGON_RPC_URL,
    UNISWAP_V3_FACTORY,
    UNISWAP_V3_QUOTER,
)
from triarb.core.types import Network, Token, TokenCategory


STABLE = TokenCategory.STABLE
MAJOR = TokenCategory.MAJOR
DEFI = TokenCategory.DEFI
MIDCAP = TokenCategory.MIDCAP
SMALLCAP = TokenCategory.SMALLCAP


# symbol, address, decimals, category, min liquidity
ARBITRUM_TOKENS: Final[list[tuple[str, str, int, TokenCategory, float]]] = [
    # Stablecoins
    ("USDC", "0xaf88d065e77c8cc2239327c5edb3a432268e5831", 6, STABLE, 50000),
    ("USDC.e", "0xff970a61a04b1ca14834a43f5de4533ebddb5cc8", 6, STABLE, 30000),
    ("USDT", "0xfd086bc7cd5c481dcc9c85ebe478a1c0b69fcbb9", 6, STABLE, 40000),
    ("DAI", "0xda10009cbd5d07dd0cecc66161fc93d7c9000da1", 18, STABLE, 20000),
    ("LUSD", "0x93b346b6bc25483a79a3e517304e2b5c1de2e47c", 18, STABLE, 5000),
    ("FRAX", "0x17fc002b466eec40dae837fc4be5c67993ddbd6f", 18, STABLE, 5000),
    # Majors
    ("WETH", "0x82af49447d8a07e3bd95bd0d56f35241523fbab1", 18, MAJOR, 10000),
    ("WBTC", "0x2f2a2543b76a4166549f7aab2e75bef0aefc5b0f", 8, MAJOR, 500),
    ("cbETH", "0x1debd73e752beaf79865fd6446b0c970eae7732f", 18, MAJOR, 1000),
    ("cbBTC", "0x28fe63565e51ceaf7e3b686d6cd7ba24fb4a8558", 8, MAJOR, 50),
    ("tBTC", "0x6c84a8f1c29108f47a79964b5fe888d4f4d0de40", 18, MAJOR, 100),
    # DeFi
    ("ARB", "0x912ce59144191c1204e64559fe8253a0e49e6548", 18, DEFI, 20000),
    ("GMX", "0xfc5a1a6eb076a2c7ad06ed22c90d7e710e35ad0a", 18, DEFI, 5000),
    ("UNI", "0xfa7f8980b0f1e64a2062791cc3b0871572f1f7f0", 18, DEFI, 3000),
    ("LINK", "0xf97f4df75117a78c1a5a0dbb814af92458539fb4", 18, DEFI, 4000),
    ("AAVE", "0x7fc66500c84a76ad7e9c93437bfc5ac33e2ddae9", 18, DEFI, 1000),
    ("CRV", "0x11cdb42b0eb46d95f990bedd4695a6e3fa034978", 18, DEFI, 2000),
    ("COMP", "0x354a6da4a1c414131c964d7c0b50c373e9c1a845", 18, DEFI, 500),
    ("SNX", "0x8700daec35af8ff88c16bdf0418774cb3d7599b4", 18, DEFI, 800),
    ("MKR", "0x2e14bf0409894809d5e2e733707698d38c400a62", 18, DEFI, 300),
    ("BAL", "0x040d1edc9569d4bab2d15287dc5a4f10f56a56b8", 18, DEFI, 400),
    ("LDO", "0x13ad51ed4f1b7e9dc168d8a00cb3f91e71e6e8d0", 18, DEFI, 1500),
    ("FXS", "0x9d2f299715d94d8a7e6f5eaa8e654e8c74a988a7", 18, DEFI, 800),
    ("SUSHI", "0xd4d42f0b6def4ce0383636770ef773390d85c61a", 18, DEFI, 600),
    ("PENDLE", "0x0c880f6761f1af8d9aa9c466984b80dab9a8c9e8", 18, DEFI, 700),
    ("RPL", "0xb766039cc6db368759c1e56b79affe831d0cc507", 18, DEFI, 200),
    # Mid caps
    ("MAGIC", "0x539bde0d4d63320772d99f2d1be671a7c23e7e4c", 18, MIDCAP, 1000),
    ("RDNT", "0x230d620a2c47e252e6c3f75a94971f15bffb8e72", 18, MIDCAP, 800),
    ("IMX", "0x3a4f40631a4f906c2bad353ed06de7a5d3fcb430", 18, MIDCAP, 600),
    ("APE", "0x2d3bd680c6a1994e25fa22716b653e3d7a8c74dc", 18, MIDCAP, 400),
    ("AXS", "0x2be31b290b855e80d4c61b2cd0b45b5e961483a5", 18, MIDCAP, 300),
    ("GRT", "0x230d620a2c47e252e6c3f75a94971f15bffb8e72", 18, MIDCAP, 500),
    ("1INCH", "0x5438107231c501f4929a5e2e3155e2665a9a8f7b", 18, MIDCAP, 400),
    ("YFI", "0x92a4e761d63a5e554a252e735463e97a7a3db93a", 18, MIDCAP, 100),
    ("BAT", "0x1fe622e247605caa74864bb598084a053d8db3e3", 18, MIDCAP, 200),
    ("MANA", "0x3b484b82567a09e2588a13d54d032153f0c0aee0", 18, MIDCAP, 300),
    ("MATIC", "0x6f14c025c4eb8cf9499c7dd3e82517a67c09c2cd", 18, MIDCAP, 800),
    ("ENS", "0x3e97808d9ef9a7d7ed98312e3fe9f070b94269de", 18, MIDCAP, 150),
    ("UMA", "0x07c654634b5d52a2f295a4911f8f1987a6e56a33", 18, MIDCAP, 100),
    ("PERP", "0x67c597624b17b16fb7b6d89c9e87a83d3da07f1b", 18, MIDCAP, 200),
    ("RNDR", "0xa45e36133a1e79d62f99e4f4c6c9e8e9f0a1b2c3", 18, MIDCAP, 150),
    ("ANKR", "0xe05a08244e5c6e65edea2cce6a4ec8fd3ba915c4", 18, MIDCAP, 100),
    ("ETHFI", "0x9a6ae5622990ba5ec98225a455c56f4d5a8a0b1c", 18, MIDCAP, 80),
    ("ZRO", "0x957c9c64f7c2ce091e54af275d4ef8e72e434d5e", 18, MIDCAP, 50),
    ("ARKM", "0x5c54e69e08849145065638863172a61a2b57497e", 18, MIDCAP, 60),
    ("ONDO", "0x9f39e5a0a9a9b8c7d6e5f4c3b2a1908f7e6d5c4b", 18, MIDCAP, 40),
    ("SYN", "0x9988843262134637195981eaaa8858da39236c3e", 18, MIDCAP, 70),
    # Small caps / higher risk
    ("PEPE", "0x7069e91f2e19f862c21453d753e70afeb1914318", 18, SMALLCAP, 50),
    ("TURBO", "0x1a8e39ae59e5556b56b76fcba98d22c9ae557396", 18, SMALLCAP, 30),
    ("MOG", "0x3c753b1a9e9a1e9e9f0a1b2c3d4e5f6a7b8c9d0e", 18, SMALLCAP, 20),
    ("MIM", "0xfea7a6a0b346362bf88a9e4a88416b77a57d6c2a", 18, SMALLCAP, 40),
    ("SPELL", "0x3e6648c5a70a150a88bce65f4ad4d506fe15d2af", 18, SMALLCAP, 30),
    ("ALPHA", "0xc854e43631a66032b4a37b6c96d8a7fb8c5d6e9e", 18, SMALLCAP, 25),
    ("API3", "0x43448ca009a397316b4e566e714eb8217e12e152", 18, SMALLCAP, 20),
    ("BICO", "0x5f016b336c804d52a39e96f44b4f5e265a8a7f3d", 18, SMALLCAP, 15),
    ("COW", "0xdef1ca1fb7fbcdc777520aa7f396b4e015f497ab", 18, SMALLCAP, 10),
    ("SD", "0x3432b6a60d23ca0dfca7761b7ab56459d9c964d0", 18, SMALLCAP, 8),
    ("AXL", "0x8ff33111786bf5e56a56d603df6a8116b5a9174a", 18, SMALLCAP, 12),
    ("MORPHO", "0x57a2f53c8f1d6e8e9f0a1b2c3d4e5f6a7b8c9d0e", 18, SMALLCAP, 10),
]

POLYGON_TOKENS: Final[list[tuple[str, str, int, TokenCategory, float]]] = [
    # Stablecoins
    ("USDC", "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174", 6, STABLE, 30000),
    ("USDT", "0xc2132D05D31c914a87C6611C10748AEb04B58e8F", 6, STABLE, 25000),
    ("DAI", "0x8f3Cf7ad23Cd3CaDbD9735AFf958023239c6A063", 18, STABLE, 15000),
    ("FRAX", "0x45c32fA6DF82ead1e2EF74d17b76547EDdFfE206", 18, STABLE, 3000),
    ("LUSD", "0x93b346b6bc25483a79a3e517304e2b5c1de2e47c", 18, STABLE, 1000),
    ("GUSD", "0x62359Ed7505Efc61FF1D56fEF82158CcaffA23D7", 2, STABLE, 500),
    ("BUSD", "0xdAb529f40E671A1D4bF91361c21bf9f0C9712ab7", 18, STABLE, 1000),
    # Majors
    ("WETH", "0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619", 18, MAJOR, 5000),
    ("WBTC", "0x1BFD67037B42Cf73acF2047067bd4F2C47D9BfD6", 8, MAJOR, 200),
    ("WMATIC", "0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270", 18, MAJOR, 10000),
    # DeFi
    ("AAVE", "0xd6df932a45c0f255f85145f286ea0b292b21c90b", 18, DEFI, 800),
    ("LINK", "0xb33EaAd8d922B1083446DC23f610c2567fB5180f", 18, DEFI, 1500),
    ("UNI", "0x4c19596f5aaff459fa38b0f7ed92f11ae6543784", 18, DEFI, 800),
    ("CRV", "0x172370d5Cd63279eFa6d502DAB29171933a610AF", 18, DEFI, 600),
    ("SNX", "0x50B728D8D964fd00C2d0AAD81718b71311feF68a", 18, DEFI, 300),
    ("SUSHI", "0x0b3F868E0BE5597D5DB7fB1f246656A3173BdD50", 18, DEFI, 200),
    ("COMP", "0x8505b9d2254a7ae468c0e9dd10ccea3a837aef5c", 18, DEFI, 150),
    ("MKR", "0x6f7C932e7684666C9fd1d445277654365bc1011c", 18, DEFI, 100),
    ("BAL", "0x9a71012B13CA4d3D0Cdc72A177DF3ef03b0E76A3", 18, DEFI, 80),
    ("FXS", "0x3e121107F6F22Da4911079845a470733ACFe4CA5", 18, DEFI, 60),
    ("LDO", "0xC3C7d4228098520355d85941A481512E6b31E154", 18, DEFI, 40),
    ("PENDLE", "0x0C880f6761F1af8d9aA9C466984b80Dab9a8c9e8", 18, DEFI, 30),
    # Mid caps
    ("QUICK", "0xB5C0642510a044dA1431547651885E2599891180", 18, MIDCAP, 50),
    ("GRT", "0x5fe2B58c013d7601147DcdD68C143A77499f5531", 18, MIDCAP, 200),
    ("1INCH", "0x111111111117dc0aa78b770fa6a738034120c302", 18, MIDCAP, 100),
    ("AXS", "0x3323916121E777F8E923091B7e4781656c51CC39", 18, MIDCAP, 80),
    ("APE", "0x4791396604512f8584f15bb54ef5e38b12e1b31a", 18, MIDCAP, 60),
    ("SAND", "0x3E708Fdb6E7483814C99559E224D2c41a0538E00", 18, MIDCAP, 70),
    ("MANA", "0xA1c57f48F0Deb89f569dFbe6E2B7f46D33606fD4", 18, MIDCAP, 90),
    ("IMX", "0x607a9f2d98A1a5E43E44B1f19Ae962543b38C421", 18, MIDCAP, 40),
    ("RNDR", "0x61299774020dA444Af8416062C8152f3Fc3fF201", 18, MIDCAP, 30),
    ("PERP", "0x67c597624b17b16fb7b6d89c9e87a83d3da07f1b", 18, MIDCAP, 20),
    # Small caps / higher risk
    ("MIM", "0x49a0421f7631145e138491c1e3C6631541182e91", 18, SMALLCAP, 15),
    ("GNO", "0x5FFD62D3C3eE2E867574c26A2F7C14122aD33123", 18, SMALLCAP, 8),
    ("BNT", "0x31f4904F6d16190DB594171b75908201f476AfF9", 18, SMALLCAP, 10),
    ("ENJ", "0x2C78F1b70Cc349542c83269d9b3289e36d38261d", 18, SMALLCAP, 12),
    ("BAND", "0x4136e91140a0e4C36D2C3189E91C1A128247117D", 18, SMALLCAP, 6),
    ("CTSI", "0x6A6C605700f477E3848932a7c272432546421080", 18, SMALLCAP, 5),
    ("ALCX", "0x765277eebeca2e31912c9946eae1021199b39c61", 18, SMALLCAP, 4),
    ("ALICE", "0x3402a719021e1e8b1d14e6d78c2815419f1e37c1", 18, SMALLCAP, 3),
    ("AGLD", "0x5592ec0cfb3d079665e877c5a623c1f78190fa36", 18, SMALLCAP, 2),
    ("ALPHA", "0x2675609F6C2a62aE1BD2dB28B19d51331C212B5F", 18, SMALLCAP, 3),
    ("AMP", "0xb99e247c1a39f7dcfd6e3b8fc9ab24eef7eb6e33", 18, SMALLCAP, 2),
    ("ANT", "0x960b236A07cf122663c4303350609A66A7B288C0", 18, SMALLCAP, 1),
    ("ARPA", "0x8F1E15bc8cA9215F6BA3428AE5249359d0252713", 18, SMALLCAP, 2),
    ("AUDIO", "0x0b38210ea11411557c13457D4dA7dC6ea731B88a", 18, SMALLCAP, 3),
    ("BICO", "0x5f016b336c804d52a39e96f44b4f5e265a8a7f3d", 18, SMALLCAP, 2),
    ("BLZ", "0x26c8AFBBFE1EBaca03C2bB082E69D0476Bffe099", 18, SMALLCAP, 1),
    ("ERN", "0x1dF34a1A33b3911803b15B344CD1c18F5E923691", 18, SMALLCAP, 2),
    ("GTC", "0x0cEC1A9154Ff802e7934Fc916Ed7Ca50bDE6844e", 18, SMALLCAP, 1),
    ("GYEN", "0xB2987753D1561570913920401E43C5A4106B6161", 6, SMALLCAP, 0.5),
    ("HOPR", "0xfE1C248349220150673F7d8929d2255d99F22d31", 18, SMALLCAP, 1),
    ("INDEX", "0x72355A56D50831481d5e1ef3712359E025212024", 18, SMALLCAP, 0.8),
    ("JASMY", "0x7B9C2f68F16c3613e8b6c93Ef67d37E5d8c0A944", 18, SMALLCAP, 1),
    ("LOKA", "0x5a33492d5db4474e72c6b3e61266a7f2a01e5f2a", 18, SMALLCAP, 0.5),
    ("LRC", "0x24D39324C3693956463d28cB23431964D515D3a5", 18, SMALLCAP, 0.7),
]


def build_tokens(
    entries: list[tuple[str, str, int, TokenCategory, float]],
) -> dict[str, Token]:
    """Build a symbol -> Token catalog preserving declaration order."""
    return {
        symbol: Token(
            symbol=symbol,
            address=address,
            decimals=decimals,
            category=category,
            min_liquidity=float(min_liquidity),
        )
        for symbol, address, decimals, category, min_liquidity in entries
    }


def build_networks(
    arbitrum_rpc: str = ARBITRUM_RPC_URL,
    polygon_rpc: str = POLYGON_RPC_URL,
) -> dict[str, Network]:
    """
    Build the supported networks.

    Args:
        arbitrum_rpc: RPC endpoint for Arbitrum One.
        polygon_rpc: RPC endpoint for Polygon PoS.

    Returns:
        Mapping of network id -> Network.
    """
    return {
        "arbitrum": Network(
            id="arbitrum",
            name="Arbitrum",
            chain_id=42161,
            rpc_url=arbitrum_rpc,
            quoter=UNISWAP_V3_QUOTER,
            factory=UNISWAP_V3_FACTORY,
            tokens=build_tokens(ARBITRUM_TOKENS),
        ),
        "polygon": Network(
            id="polygon",
            name="Polygon",
            chain_id=137,
            rpc_url=polygon_rpc,
            quoter=UNISWAP_V3_QUOTER,
            factory=UNISWAP_V3_FACTORY,
            tokens=build_tokens(POLYGON_TOKENS),
        ),
    }

from decimal import Decimal

from solana.constants import LAMPORTS_PER_SOL


def sol_to_lamports(amount: Decimal) -> int:
    return int(amount * LAMPORTS_PER_SOL)


def lamports_to_sol(lamports: int) -> Decimal:
    return Decimal(lamports) / LAMPORTS_PER_SOL

from decimal import Decimal, localcontext

from arc_tracker.core.use_cases.wallet_aggregator import WIDE_CONTEXT, fixed, to_units

GWEI = 10 ** 9
ETH_DECIMALS = 18


class GasComparison:
    """
    Running total of gas paid on Arc (USDC gas token) and of the savings
    against the same gas priced on the reference network.
    """

    def __init__(self, ref_gas_price_gwei: int = 30, ref_token_price_usd: int = 2500, gas_token_decimals: int = 6):
        self.ref_gas_price_wei = ref_gas_price_gwei * GWEI
        self.ref_token_price_usd = Decimal(ref_token_price_usd)
        self.gas_token_decimals = gas_token_decimals
        self.gas_spent = Decimal(0)
        self.savings_usd = Decimal(0)
        self.count = 0

    def add(self, gas_used: int, gas_price: int) -> Decimal:
        """Folds one transaction in and returns its savings."""
        with localcontext(WIDE_CONTEXT):
            gas_cost = to_units(gas_used * gas_price, self.gas_token_decimals)
            ref_cost_usd = to_units(gas_used * self.ref_gas_price_wei, ETH_DECIMALS) * self.ref_token_price_usd
            saving = ref_cost_usd - gas_cost

            self.gas_spent += gas_cost
            self.savings_usd += saving
        self.count += 1
        return saving

    @property
    def gas_spent_str(self) -> str:
        with localcontext(WIDE_CONTEXT):
            return fixed(self.gas_spent, 6)

    @property
    def savings_usd_str(self) -> str:
        with localcontext(WIDE_CONTEXT):
            return fixed(self.savings_usd, 2)

"""Built-in seed catalog and product-type explainers.

The seed list is the fallback catalog when no external source is configured.
"""

from __future__ import annotations

from src.models.enums import ProductType
from src.schemas.eligibility import LenderProduct

# Plain-language explanation per product family, shown next to lender details
PRODUCT_TYPE_EXPLAINERS: dict[ProductType, dict[str, str]] = {
    ProductType.WORKING_CAPITAL: {
        "repayment_style": "Fixed weekly/monthly debit",
        "best_for": "Predictable, steady revenue businesses",
        "watch_out_for": "Same repayment even during slow months",
        "analogy": "Like a gym membership: same amount every period",
        "default_repayment_description": "Fixed weekly or monthly debit orders from your bank account",
    },
    ProductType.MERCHANT_CASH_ADVANCE: {
        "repayment_style": "% of card sales",
        "best_for": "Seasonal/fluctuating revenue",
        "watch_out_for": "Can cost more if sales spike",
        "analogy": "Like a bar tab: repay as you sell",
        "default_repayment_description": "Percentage of daily card sales automatically collected until paid off",
    },
    ProductType.REVENUE_BASED_FINANCE: {
        "repayment_style": "% of monthly turnover",
        "best_for": "High-growth, recurring revenue",
        "watch_out_for": "Term can extend if revenue drops",
        "analogy": "They take a cut of your monthly turnover",
        "default_repayment_description": "Fixed percentage of monthly revenue until target multiple reached",
    },
    ProductType.INVOICE_DISCOUNTING: {
        "repayment_style": "Sell invoice, get % upfront",
        "best_for": "Long debtor cycles (30-90 days)",
        "watch_out_for": "Fees per invoice, client payment risk",
        "analogy": "Basically selling your invoice to get paid early",
        "default_repayment_description": "Advance against invoices, automatically repaid when customers pay",
    },
    ProductType.TERM_LOAN: {
        "repayment_style": "Monthly installment",
        "best_for": "Quick cash gaps, expansion",
        "watch_out_for": "Higher rates than banks",
        "analogy": "Traditional loan with fixed monthly payments",
        "default_repayment_description": "Fixed monthly installments over agreed loan term",
    },
    ProductType.ASSET_FINANCE: {
        "repayment_style": "Fixed monthly repayment",
        "best_for": "Equipment or vehicle needs",
        "watch_out_for": "Asset is security: you lose it if you default",
        "analogy": "Buy now, pay later for business equipment",
        "default_repayment_description": "Fixed monthly payments secured against the financed asset",
    },
}


PRODUCTS: tuple[LenderProduct, ...] = (
    LenderProduct(
        id="bridgement-wc",
        provider="Bridgement",
        logo="/logos/bridgement.svg",
        product_type=ProductType.WORKING_CAPITAL,
        amount_min=250_000,
        amount_max=1_000_000,
        min_years=2,
        min_monthly_turnover=200_000,
        vat_required=True,
        speed_days=(3, 5),
        interest_rate=(12, 18),
        notes="Fast approval for VAT-registered businesses with consistent cashflow",
    ),
    LenderProduct(
        id="merchant-capital-mca",
        provider="Merchant Capital",
        logo="/logos/merchant-capital.svg",
        product_type=ProductType.MERCHANT_CASH_ADVANCE,
        amount_min=50_000,
        amount_max=5_000_000,
        min_years=1,
        min_monthly_turnover=100_000,
        vat_required=False,
        speed_days=(1, 2),
        interest_rate=(20, 35),
        notes="Quick funding against future card sales, perfect for retail and hospitality",
    ),
    LenderProduct(
        id="lulalend-term",
        provider="Lulalend",
        logo="/logos/lulalend.svg",
        product_type=ProductType.TERM_LOAN,
        amount_min=20_000,
        amount_max=2_000_000,
        min_years=1,
        min_monthly_turnover=50_000,
        vat_required=False,
        speed_days=(2, 3),
        provinces_allowed=("Gauteng", "Western Cape", "KZN"),
        interest_rate=(14, 22),
        notes="Flexible terms for growing SMEs in major metros",
    ),
    LenderProduct(
        id="retail-capital-invoice",
        provider="Retail Capital",
        logo="/logos/retail-capital.svg",
        product_type=ProductType.INVOICE_DISCOUNTING,
        amount_min=100_000,
        amount_max=10_000_000,
        min_years=3,
        min_monthly_turnover=500_000,
        vat_required=True,
        speed_days=(5, 7),
        sector_exclusions=("Hospitality",),
        notes="Unlock cash from outstanding invoices for established B2B companies",
    ),
    LenderProduct(
        id="fundrr-wc",
        provider="Fundrr",
        logo="/logos/fundrr.svg",
        product_type=ProductType.WORKING_CAPITAL,
        amount_min=50_000,
        amount_max=500_000,
        min_years=2,
        min_monthly_turnover=150_000,
        vat_required=True,
        speed_days=(3, 5),
        notes="Transparent pricing with no hidden fees for working capital needs",
    ),
    LenderProduct(
        id="spark-asset",
        provider="Spark Capital",
        logo="/logos/spark.svg",
        product_type=ProductType.ASSET_FINANCE,
        amount_min=500_000,
        amount_max=20_000_000,
        min_years=5,
        min_monthly_turnover=1_000_000,
        vat_required=True,
        speed_days=(10, 14),
        collateral_required=True,
        notes="Equipment and vehicle financing for established businesses",
    ),
    LenderProduct(
        id="grobank-term",
        provider="Grobank",
        logo="/logos/grobank.svg",
        product_type=ProductType.TERM_LOAN,
        amount_min=1_000_000,
        amount_max=50_000_000,
        min_years=5,
        min_monthly_turnover=2_000_000,
        vat_required=True,
        speed_days=(14, 21),
        collateral_required=True,
        sector_exclusions=("Logistics", "Manufacturing"),
        notes="Traditional bank lending for qualified enterprises",
    ),
    LenderProduct(
        id="payfast-mca",
        provider="PayFast Capital",
        logo="/logos/payfast.svg",
        product_type=ProductType.MERCHANT_CASH_ADVANCE,
        amount_min=30_000,
        amount_max=300_000,
        min_years=1,
        min_monthly_turnover=80_000,
        vat_required=False,
        speed_days=(1, 2),
        provinces_allowed=("Gauteng", "Western Cape"),
        notes="Instant funding for PayFast merchants based on transaction history",
    ),
    LenderProduct(
        id="business-partners-term",
        provider="Business Partners",
        logo="/logos/business-partners.svg",
        product_type=ProductType.TERM_LOAN,
        amount_min=500_000,
        amount_max=15_000_000,
        min_years=3,
        min_monthly_turnover=800_000,
        vat_required=True,
        speed_days=(21, 30),
        notes="Patient capital with mentorship for SME growth",
    ),
    LenderProduct(
        id="finclusion-wc",
        provider="Finclusion",
        logo="/logos/finclusion.svg",
        product_type=ProductType.WORKING_CAPITAL,
        amount_min=100_000,
        amount_max=750_000,
        min_years=2,
        min_monthly_turnover=250_000,
        vat_required=False,
        speed_days=(5, 7),
        sector_exclusions=("Retail",),
        notes="Digital-first lending for service and logistics businesses",
    ),
)

# app.py
import matplotlib.pyplot as plt
import streamlit as st

from bonds import classify_price, percent_of_par, price_bond
from defaults import PRICE_DEFAULTS, YIELD_DEFAULTS, setup_logging
from errors import BondMathError, NonConvergence
from formatting import bond_status, format_currency, format_percent, price_formula
from frequency import PaymentFrequency, parse_frequency
from sensitivity import price_sensitivity
from yields import solve_yield

setup_logging()

FREQ_LABELS = [f.label for f in PaymentFrequency]


# ---------------------------
# Micro-caching wrappers
# ---------------------------
@st.cache_data(show_spinner=False, ttl=300)
def cached_price(face, coupon_pct, market_pct, years, freq_label):
    return price_bond(face, coupon_pct, market_pct, years, freq_label)


@st.cache_data(show_spinner=False, ttl=300)
def cached_sensitivity(face, coupon_pct, market_pct, years, freq_label, vary):
    return price_sensitivity(face, coupon_pct, market_pct, years, freq_label, vary=vary)


def _reset(prefix: str, defaults: dict) -> None:
    for name, value in defaults.items():
        st.session_state[f"{prefix}__{name}"] = value


def _init(prefix: str, defaults: dict) -> None:
    for name, value in defaults.items():
        st.session_state.setdefault(f"{prefix}__{name}", value)


def _sensitivity_chart(df, xlabel: str, current_rate: float, title: str):
    fig, ax = plt.subplots()
    ax.plot(df["rate"], df["price"], marker="o")
    ax.axvline(current_rate, linestyle="--", linewidth=1, label="Current rate")
    ax.set_xlabel(xlabel)
    ax.set_ylabel("Price")
    ax.set_title(title)
    ax.grid(True, linestyle="--", alpha=0.6)
    ax.legend()
    return fig


# ---------------------------
# Page config
# ---------------------------
st.set_page_config(page_title="Bond Calculator", page_icon="💰", layout="wide")

st.title("💰 Bond Calculator")
st.caption("Price a fixed-coupon bond from a market rate, or solve current yield and YTM from a price.")

_init("px", PRICE_DEFAULTS)
_init("yl", YIELD_DEFAULTS)

tab1, tab2 = st.tabs(["🧮 Bond Price", "📈 Yields"])

# ===== TAB 1: Price from market rate =====
with tab1:
    st.subheader("Bond Price — Discounted Cash Flows")

    c1, c2, c3 = st.columns(3)
    face = c1.number_input("Face value", min_value=1.0, step=100.0, key="px__face_value")
    coupon_pct = c2.slider("Coupon rate (% per year)", 0.0, 20.0, step=0.25, key="px__coupon_rate_pct")
    market_pct = c3.slider("Market rate (% per year)", 0.0, 20.0, step=0.25, key="px__market_rate_pct")

    c4, c5 = st.columns(2)
    years = int(c4.number_input("Term (years)", min_value=1, max_value=100, step=1, key="px__term_years"))
    freq_label = c5.selectbox("Payment frequency", FREQ_LABELS, key="px__frequency")

    st.button("Reset", key="px_reset", on_click=_reset, args=("px", PRICE_DEFAULTS))

    try:
        res = cached_price(face, coupon_pct, market_pct, years, freq_label)
    except BondMathError as e:
        st.error(f"Input error: {e}")
    else:
        m1, m2, m3 = st.columns(3)
        m1.metric("Bond price", format_currency(res.price))
        m1.caption(f"{percent_of_par(res.price, face):.2f}% of par value")
        m2.metric("PV of coupons", format_currency(res.pv_coupons))
        m3.metric("PV of face value", format_currency(res.pv_face))

        with st.expander("Calculation details", expanded=False):
            st.code(price_formula(res, face), language=None)
            st.markdown(
                f"**{res.periods_total}** periods, coupon of "
                f"**{format_currency(res.coupon_payment)}** per period."
            )
            st.dataframe(
                res.as_dataframe().round(2),
                use_container_width=True,
                hide_index=True,
            )

        st.markdown("### Price sensitivity")
        g1, g2 = st.columns(2)
        df_cpn = cached_sensitivity(face, coupon_pct, market_pct, years, freq_label, "coupon")
        g1.pyplot(
            _sensitivity_chart(df_cpn, "Coupon rate (%)", coupon_pct, "Price vs. coupon rate"),
            use_container_width=True,
        )
        df_mkt = cached_sensitivity(face, coupon_pct, market_pct, years, freq_label, "market")
        g2.pyplot(
            _sensitivity_chart(df_mkt, "Market rate (%)", market_pct, "Price vs. market rate"),
            use_container_width=True,
        )

# ===== TAB 2: Current yield & YTM from price =====
with tab2:
    st.subheader("Current Yield & Yield to Maturity")

    y1, y2, y3 = st.columns(3)
    y_face = y1.number_input("Face value", min_value=1.0, step=100.0, key="yl__face_value")
    y_coupon = y2.slider("Coupon rate (% per year)", 0.0, 20.0, step=0.25, key="yl__coupon_rate_pct")
    y_price = y3.number_input("Current price", min_value=0.01, step=1.0, key="yl__observed_price")

    y4, y5 = st.columns(2)
    y_years = int(y4.number_input("Term (years)", min_value=1, max_value=100, step=1, key="yl__term_years"))
    y_freq = y5.selectbox("Payment frequency", FREQ_LABELS, key="yl__frequency")

    b1, b2, _ = st.columns([1, 1, 4])
    calc = b1.button("Calculate", key="yl_calc", type="primary")
    b2.button("Reset", key="yl_reset", on_click=_reset, args=("yl", YIELD_DEFAULTS))

    if calc:
        yres = None
        try:
            yres = solve_yield(y_face, y_coupon, y_price, y_years, parse_frequency(y_freq), strict=True)
        except NonConvergence as e:
            yres = e.result
            st.warning(
                f"YTM did not converge after {yres.iterations} iterations; "
                "the value shown is an approximation."
            )
        except BondMathError as e:
            st.error(f"Input error: {e}")

        if yres is not None:
            r1, r2 = st.columns(2)
            r1.metric("Current yield", format_percent(yres.current_yield))
            r2.metric("Yield to maturity", format_percent(yres.ytm))

            st.markdown("**Bond status**")
            msg = bond_status(y_price, y_face, yres.ytm, y_coupon)
            status = classify_price(y_price, y_face)
            if status == "discount":
                st.success(msg)
            elif status == "premium":
                st.warning(msg)
            else:
                st.info(msg)

    st.caption(
        "Yield to Maturity (YTM) is calculated using the Newton-Raphson method to solve for the internal rate of return."
    )

"""Default construction parameters for every registered indicator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PeriodParams:
    """Indicators configured by a single window length."""
    period: int = 9


@dataclass(frozen=True)
class NoParams:
    """Indicators with nothing to configure (true range)."""


@dataclass(frozen=True)
class BandParams:
    """Average plus/minus a scaled volatility measure."""
    period: int = 9
    multiplier: float = 2.0


@dataclass(frozen=True)
class ConvergenceParams:
    """Fast/slow EMA spread with a signal line."""
    fast_period: int = 12                            # Must be shorter than slow_period
    slow_period: int = 26
    signal_period: int = 9


@dataclass(frozen=True)
class StochasticParams:
    """Stochastic oscillator with EMA smoothing."""
    period: int = 14
    ema_period: int = 3


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration, one entry per indicator key."""
    sma: PeriodParams
    ema: PeriodParams
    wma: PeriodParams
    hma: PeriodParams
    max: PeriodParams
    min: PeriodParams
    sd: PeriodParams
    mad: PeriodParams
    tr: NoParams
    atr: PeriodParams
    bb: BandParams
    kc: BandParams
    ce: BandParams
    macd: ConvergenceParams
    ppo: ConvergenceParams
    rsi: PeriodParams
    roc: PeriodParams
    fast_stoch: PeriodParams
    slow_stoch: StochasticParams
    cci: PeriodParams
    er: PeriodParams
    mfi: PeriodParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        sma=PeriodParams(period=9),
        ema=PeriodParams(period=9),
        wma=PeriodParams(period=9),
        hma=PeriodParams(period=9),
        max=PeriodParams(period=14),
        min=PeriodParams(period=14),
        sd=PeriodParams(period=9),
        mad=PeriodParams(period=9),
        tr=NoParams(),
        atr=PeriodParams(period=14),
        bb=BandParams(period=9, multiplier=2.0),
        kc=BandParams(period=10, multiplier=2.0),
        ce=BandParams(period=22, multiplier=3.0),
        macd=ConvergenceParams(),
        ppo=ConvergenceParams(),
        rsi=PeriodParams(period=14),
        roc=PeriodParams(period=9),
        fast_stoch=PeriodParams(period=14),
        slow_stoch=StochasticParams(period=14, ema_period=3),
        cci=PeriodParams(period=20),
        er=PeriodParams(period=14),
        mfi=PeriodParams(period=14),
    )

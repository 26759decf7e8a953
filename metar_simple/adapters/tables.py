"""
Code tables mapping coded enumerations and digits to domain enumerations.

Every lookup is total: unknown, not reported and reserved codes map to the
``UNKNOWN`` member of the target enumeration (or to ``None`` where the
target field is left unset).
"""

from typing import Dict, Optional, Tuple

from metar_simple.groups.groups import LayerForecastType, MiscType, VicinityType
from metar_simple.groups.values import (
    CodedCloudAmount,
    CodedCloudType,
    ConvectiveType,
    LightningFrequencyCode,
    LightningTypeCode,
    RvrTrendCode,
)
from metar_simple.models.aerodrome import (
    ColourCode,
    RunwayContamExtent,
    RunwayDeposits,
    RvrTrend,
)
from metar_simple.models.current import (
    HighCloudLayer,
    LightningFrequency,
    LightningType,
    LowCloudLayer,
    MidCloudLayer,
    VicinityPhenomena,
)
from metar_simple.models.essentials import CloudAmount, CloudDetails, SkyCondition, WeatherPhenomena
from metar_simple.models.forecast import (
    IcingSeverity,
    IcingType,
    TurbulenceFrequency,
    TurbulenceLocation,
    TurbulenceSeverity,
)
from metar_simple.models.historical import PressureTendency, PressureTrend

_CLOUD_AMOUNTS = {
    CodedCloudAmount.FEW: CloudAmount.FEW,
    CodedCloudAmount.SCATTERED: CloudAmount.SCATTERED,
    CodedCloudAmount.BROKEN: CloudAmount.BROKEN,
    CodedCloudAmount.OVERCAST: CloudAmount.OVERCAST,
    CodedCloudAmount.VARIABLE_FEW_SCATTERED: CloudAmount.VARIABLE_FEW_SCATTERED,
    CodedCloudAmount.VARIABLE_SCATTERED_BROKEN: CloudAmount.VARIABLE_SCATTERED_BROKEN,
    CodedCloudAmount.VARIABLE_BROKEN_OVERCAST: CloudAmount.VARIABLE_BROKEN_OVERCAST,
}

_SKY_CONDITIONS = {
    CodedCloudAmount.NOT_REPORTED: SkyCondition.UNKNOWN,
    CodedCloudAmount.NSC: SkyCondition.NO_SIGNIFICANT_CLOUD,
    CodedCloudAmount.NCD: SkyCondition.CLEAR_NCD,
    CodedCloudAmount.NONE_CLR: SkyCondition.CLEAR_CLR,
    CodedCloudAmount.NONE_SKC: SkyCondition.CLEAR_SKC,
    CodedCloudAmount.OBSCURED: SkyCondition.OBSCURED,
}

_CONVECTIVE_DETAILS = {
    ConvectiveType.NONE: CloudDetails.NOT_TOWERING_CUMULUS_NOT_CUMULONIMBUS,
    ConvectiveType.NOT_REPORTED: CloudDetails.UNKNOWN,
    ConvectiveType.TOWERING_CUMULUS: CloudDetails.TOWERING_CUMULUS,
    ConvectiveType.CUMULONIMBUS: CloudDetails.CUMULONIMBUS,
}

_DEPOSITS = {
    0: RunwayDeposits.CLEAR_AND_DRY,
    1: RunwayDeposits.DAMP,
    2: RunwayDeposits.WET_AND_WATER_PATCHES,
    3: RunwayDeposits.RIME_AND_FROST_COVERED,
    4: RunwayDeposits.DRY_SNOW,
    5: RunwayDeposits.WET_SNOW,
    6: RunwayDeposits.SLUSH,
    7: RunwayDeposits.ICE,
    8: RunwayDeposits.COMPACTED_OR_ROLLED_SNOW,
    9: RunwayDeposits.FROZEN_RUTS_OR_RIDGES,
}

# Digits 3, 4, 6, 7 and 8 are reserved
_EXTENTS = {
    0: RunwayContamExtent.NO_DEPOSITS,
    1: RunwayContamExtent.LESS_THAN_11_PERCENT,
    2: RunwayContamExtent.FROM_11_TO_25_PERCENT,
    5: RunwayContamExtent.FROM_26_TO_50_PERCENT,
    9: RunwayContamExtent.MORE_THAN_50_PERCENT,
}

# Braking action codes 91-95 as the lowest friction coefficient of their band
_BRAKING_ACTION_COEFFICIENTS = {
    91: 0,
    92: 26,
    93: 30,
    94: 36,
    95: 41,
}
FRICTION_UNRELIABLE = 99

_RVR_TRENDS = {
    RvrTrendCode.UPWARD: RvrTrend.UPWARD,
    RvrTrendCode.NEUTRAL: RvrTrend.NEUTRAL,
    RvrTrendCode.DOWNWARD: RvrTrend.DOWNWARD,
}

# Colour code and whether it is the BLACK variant
_COLOUR_CODES: Dict[MiscType, Tuple[ColourCode, bool]] = {
    MiscType.COLOUR_CODE_BLUE: (ColourCode.BLUE, False),
    MiscType.COLOUR_CODE_WHITE: (ColourCode.WHITE, False),
    MiscType.COLOUR_CODE_GREEN: (ColourCode.GREEN, False),
    MiscType.COLOUR_CODE_YELLOW1: (ColourCode.YELLOW1, False),
    MiscType.COLOUR_CODE_YELLOW2: (ColourCode.YELLOW2, False),
    MiscType.COLOUR_CODE_AMBER: (ColourCode.AMBER, False),
    MiscType.COLOUR_CODE_RED: (ColourCode.RED, False),
    MiscType.COLOUR_CODE_BLACKBLUE: (ColourCode.BLUE, True),
    MiscType.COLOUR_CODE_BLACKWHITE: (ColourCode.WHITE, True),
    MiscType.COLOUR_CODE_BLACKGREEN: (ColourCode.GREEN, True),
    MiscType.COLOUR_CODE_BLACKYELLOW1: (ColourCode.YELLOW1, True),
    MiscType.COLOUR_CODE_BLACKYELLOW2: (ColourCode.YELLOW2, True),
    MiscType.COLOUR_CODE_BLACKAMBER: (ColourCode.AMBER, True),
    MiscType.COLOUR_CODE_BLACKRED: (ColourCode.RED, True),
}

# Tendency characteristic and trend for each 'a' digit of a 5appp group
_PRESSURE_TENDENCIES = {
    0: (PressureTendency.INCREASING_THEN_DECREASING, PressureTrend.HIGHER_OR_SAME),
    1: (PressureTendency.INCREASING_MORE_SLOWLY, PressureTrend.HIGHER),
    2: (PressureTendency.INCREASING, PressureTrend.HIGHER),
    3: (PressureTendency.INCREASING_MORE_RAPIDLY, PressureTrend.HIGHER),
    4: (PressureTendency.STEADY, PressureTrend.SAME),
    5: (PressureTendency.DECREASING_THEN_INCREASING, PressureTrend.LOWER_OR_SAME),
    6: (PressureTendency.DECREASING_MORE_SLOWLY, PressureTrend.LOWER),
    7: (PressureTendency.DECREASING, PressureTrend.LOWER),
    8: (PressureTendency.DECREASING_MORE_RAPIDLY, PressureTrend.LOWER),
}

_VICINITY = {
    VicinityType.THUNDERSTORM: VicinityPhenomena.THUNDERSTORM,
    VicinityType.CUMULONIMBUS: VicinityPhenomena.CUMULONIMBUS,
    VicinityType.CUMULONIMBUS_MAMMATUS: VicinityPhenomena.CUMULONIMBUS_MAMMATUS,
    VicinityType.TOWERING_CUMULUS: VicinityPhenomena.TOWERING_CUMULUS,
    VicinityType.ALTOCUMULUS_CASTELLANUS: VicinityPhenomena.ALTOCUMULUS_CASTELLANUS,
    VicinityType.STRATOCUMULUS_STANDING_LENTICULAR: VicinityPhenomena.STRATOCUMULUS_STANDING_LENTICULAR,
    VicinityType.ALTOCUMULUS_STANDING_LENTICULAR: VicinityPhenomena.ALTOCUMULUS_STANDING_LENTICULAR,
    VicinityType.CIRROCUMULUS_STANDING_LENTICULAR: VicinityPhenomena.CIRROCUMULUS_STANDING_LENTICULAR,
    VicinityType.ROTOR_CLOUD: VicinityPhenomena.ROTOR_CLOUD,
    VicinityType.VIRGA: VicinityPhenomena.VIRGA,
    VicinityType.PRECIPITATION_IN_VICINITY: VicinityPhenomena.PRECIPITATION,
    VicinityType.FOG: VicinityPhenomena.FOG,
    VicinityType.FOG_SHALLOW: VicinityPhenomena.FOG_SHALLOW,
    VicinityType.FOG_PATCHES: VicinityPhenomena.FOG_PATCHES,
    VicinityType.HAZE: VicinityPhenomena.HAZE,
    VicinityType.SMOKE: VicinityPhenomena.SMOKE,
    VicinityType.BLOWING_SNOW: VicinityPhenomena.BLOWING_SNOW,
    VicinityType.BLOWING_SAND: VicinityPhenomena.BLOWING_SAND,
    VicinityType.BLOWING_DUST: VicinityPhenomena.BLOWING_DUST,
}

# Weather phenomena that may be reported with the VC qualifier
_VICINITY_WEATHER = {
    WeatherPhenomena.THUNDERSTORM: VicinityPhenomena.THUNDERSTORM,
    WeatherPhenomena.FOG: VicinityPhenomena.FOG,
    WeatherPhenomena.PRECIPITATION: VicinityPhenomena.PRECIPITATION,
    WeatherPhenomena.DUST_WHIRLS: VicinityPhenomena.DUST_WHIRLS,
    WeatherPhenomena.FUNNEL_CLOUD: VicinityPhenomena.FUNNEL_CLOUD,
    WeatherPhenomena.BLOWING_DUST: VicinityPhenomena.BLOWING_DUST,
    WeatherPhenomena.BLOWING_SAND: VicinityPhenomena.BLOWING_SAND,
    WeatherPhenomena.BLOWING_SNOW: VicinityPhenomena.BLOWING_SNOW,
    WeatherPhenomena.DUST_STORM: VicinityPhenomena.DUST_STORM,
    WeatherPhenomena.SAND_STORM: VicinityPhenomena.SAND_STORM,
    WeatherPhenomena.VOLCANIC_ASH: VicinityPhenomena.VOLCANIC_ASH,
}

_LIGHTNING_FREQUENCIES = {
    LightningFrequencyCode.OCCASIONAL: LightningFrequency.OCCASIONAL,
    LightningFrequencyCode.FREQUENT: LightningFrequency.FREQUENT,
    LightningFrequencyCode.CONSTANT: LightningFrequency.CONSTANT,
}

_LIGHTNING_TYPES = {
    LightningTypeCode.IN_CLOUD: LightningType.IN_CLOUD,
    LightningTypeCode.CLOUD_CLOUD: LightningType.CLOUD_CLOUD,
    LightningTypeCode.CLOUD_GROUND: LightningType.CLOUD_GROUND,
    LightningTypeCode.CLOUD_AIR: LightningType.CLOUD_AIR,
}

_ICING = {
    LayerForecastType.ICING_TRACE_OR_NONE: (IcingSeverity.NONE_OR_TRACE, IcingType.NONE),
    LayerForecastType.ICING_LIGHT_MIXED: (IcingSeverity.LIGHT, IcingType.MIXED),
    LayerForecastType.ICING_LIGHT_RIME_IN_CLOUD: (IcingSeverity.LIGHT, IcingType.RIME_IN_CLOUD),
    LayerForecastType.ICING_LIGHT_CLEAR_IN_PRECIPITATION: (IcingSeverity.LIGHT, IcingType.CLEAR_IN_PRECIPITATION),
    LayerForecastType.ICING_MODERATE_MIXED: (IcingSeverity.MODERATE, IcingType.MIXED),
    LayerForecastType.ICING_MODERATE_RIME_IN_CLOUD: (IcingSeverity.MODERATE, IcingType.RIME_IN_CLOUD),
    LayerForecastType.ICING_MODERATE_CLEAR_IN_PRECIPITATION: (IcingSeverity.MODERATE, IcingType.CLEAR_IN_PRECIPITATION),
    LayerForecastType.ICING_SEVERE_MIXED: (IcingSeverity.SEVERE, IcingType.MIXED),
    LayerForecastType.ICING_SEVERE_RIME_IN_CLOUD: (IcingSeverity.SEVERE, IcingType.RIME_IN_CLOUD),
    LayerForecastType.ICING_SEVERE_CLEAR_IN_PRECIPITATION: (IcingSeverity.SEVERE, IcingType.CLEAR_IN_PRECIPITATION),
}

_TURBULENCE = {
    LayerForecastType.TURBULENCE_NONE: (
        TurbulenceSeverity.NONE, TurbulenceLocation.NONE, TurbulenceFrequency.NONE),
    LayerForecastType.TURBULENCE_LIGHT: (
        TurbulenceSeverity.LIGHT, TurbulenceLocation.NONE, TurbulenceFrequency.NONE),
    LayerForecastType.TURBULENCE_MODERATE_IN_CLEAR_AIR_OCCASIONAL: (
        TurbulenceSeverity.MODERATE, TurbulenceLocation.IN_CLEAR_AIR, TurbulenceFrequency.OCCASIONAL),
    LayerForecastType.TURBULENCE_MODERATE_IN_CLEAR_AIR_FREQUENT: (
        TurbulenceSeverity.MODERATE, TurbulenceLocation.IN_CLEAR_AIR, TurbulenceFrequency.FREQUENT),
    LayerForecastType.TURBULENCE_MODERATE_IN_CLOUD_OCCASIONAL: (
        TurbulenceSeverity.MODERATE, TurbulenceLocation.IN_CLOUD, TurbulenceFrequency.OCCASIONAL),
    LayerForecastType.TURBULENCE_MODERATE_IN_CLOUD_FREQUENT: (
        TurbulenceSeverity.MODERATE, TurbulenceLocation.IN_CLOUD, TurbulenceFrequency.FREQUENT),
    LayerForecastType.TURBULENCE_SEVERE_IN_CLEAR_AIR_OCCASIONAL: (
        TurbulenceSeverity.SEVERE, TurbulenceLocation.IN_CLEAR_AIR, TurbulenceFrequency.OCCASIONAL),
    LayerForecastType.TURBULENCE_SEVERE_IN_CLEAR_AIR_FREQUENT: (
        TurbulenceSeverity.SEVERE, TurbulenceLocation.IN_CLEAR_AIR, TurbulenceFrequency.FREQUENT),
    LayerForecastType.TURBULENCE_SEVERE_IN_CLOUD_OCCASIONAL: (
        TurbulenceSeverity.SEVERE, TurbulenceLocation.IN_CLOUD, TurbulenceFrequency.OCCASIONAL),
    LayerForecastType.TURBULENCE_SEVERE_IN_CLOUD_FREQUENT: (
        TurbulenceSeverity.SEVERE, TurbulenceLocation.IN_CLOUD, TurbulenceFrequency.FREQUENT),
    LayerForecastType.TURBULENCE_EXTREME: (
        TurbulenceSeverity.EXTREME, TurbulenceLocation.NONE, TurbulenceFrequency.NONE),
}

# WMO code tables 0513, 0515 and 0509, in digit order 1-9
_LOW_LAYERS = [m for m in LowCloudLayer if m not in (LowCloudLayer.NO_CLOUDS, LowCloudLayer.UNKNOWN)]
_MID_LAYERS = [m for m in MidCloudLayer if m not in (MidCloudLayer.NO_CLOUDS, MidCloudLayer.UNKNOWN)]
_HIGH_LAYERS = [m for m in HighCloudLayer if m not in (HighCloudLayer.NO_CLOUDS, HighCloudLayer.UNKNOWN)]


class CodeTables:
    """Lookups from coded enumerations and digits to domain enumerations."""

    @classmethod
    def cloud_amount(cls, coded: CodedCloudAmount) -> CloudAmount:
        return _CLOUD_AMOUNTS.get(coded, CloudAmount.UNKNOWN)

    @classmethod
    def sky_condition(cls, coded: CodedCloudAmount) -> SkyCondition:
        """Sky condition implied by a cloud group amount; any layer amount means CLOUDS."""
        if coded in _CLOUD_AMOUNTS:
            return SkyCondition.CLOUDS
        return _SKY_CONDITIONS.get(coded, SkyCondition.UNKNOWN)

    @classmethod
    def convective_details(cls, coded: ConvectiveType) -> CloudDetails:
        return _CONVECTIVE_DETAILS.get(coded, CloudDetails.UNKNOWN)

    @classmethod
    def cloud_details(cls, coded: Optional[CodedCloudType]) -> CloudDetails:
        """Cloud or obscuration type; types with no domain counterpart are UNKNOWN."""
        if coded is None:
            return CloudDetails.UNKNOWN
        return CloudDetails.__members__.get(coded.name, CloudDetails.UNKNOWN)

    @classmethod
    def runway_deposits(cls, digit: Optional[int]) -> RunwayDeposits:
        return _DEPOSITS.get(digit, RunwayDeposits.UNKNOWN)

    @classmethod
    def contamination_extent(cls, digit: Optional[int]) -> RunwayContamExtent:
        return _EXTENTS.get(digit, RunwayContamExtent.UNKNOWN)

    @classmethod
    def friction_coefficient(cls, code: Optional[int]) -> Optional[int]:
        """
        Friction coefficient in hundredths for a two-digit friction code.

        Codes 0-90 are the coefficient itself; braking action codes 91-95
        map to the lowest coefficient of their band. Codes 96-99 and missing
        codes give None.
        """
        if code is None:
            return None
        if 0 <= code <= 90:
            return code
        return _BRAKING_ACTION_COEFFICIENTS.get(code)

    @classmethod
    def rvr_trend(cls, coded: RvrTrendCode) -> RvrTrend:
        return _RVR_TRENDS.get(coded, RvrTrend.UNKNOWN)

    @classmethod
    def colour_code(cls, coded: MiscType) -> Optional[Tuple[ColourCode, bool]]:
        """Colour code and BLACK flag, or None for a non colour code group."""
        return _COLOUR_CODES.get(coded)

    @classmethod
    def pressure_tendency(cls, digit: Optional[int]) -> Tuple[Optional[PressureTendency], Optional[PressureTrend]]:
        """
        Tendency characteristic and trend for a pressure tendency digit.

        Example:
            >>> CodeTables.pressure_tendency(2)
            (<PressureTendency.INCREASING: 'INCREASING'>, <PressureTrend.HIGHER: 'HIGHER'>)
        """
        if digit is None:
            return PressureTendency.UNKNOWN, PressureTrend.UNKNOWN
        return _PRESSURE_TENDENCIES.get(digit, (None, None))

    @classmethod
    def vicinity(cls, coded: VicinityType) -> VicinityPhenomena:
        return _VICINITY[coded]

    @classmethod
    def vicinity_weather(cls, phenomena: WeatherPhenomena) -> Optional[VicinityPhenomena]:
        """Vicinity phenomenon for weather reported with VC, or None if not allowed."""
        return _VICINITY_WEATHER.get(phenomena)

    @classmethod
    def lightning_frequency(cls, coded: LightningFrequencyCode) -> LightningFrequency:
        return _LIGHTNING_FREQUENCIES.get(coded, LightningFrequency.UNKNOWN)

    @classmethod
    def lightning_type(cls, coded: LightningTypeCode) -> Optional[LightningType]:
        return _LIGHTNING_TYPES.get(coded)

    @classmethod
    def icing(cls, coded: LayerForecastType) -> Optional[Tuple[IcingSeverity, IcingType]]:
        return _ICING.get(coded)

    @classmethod
    def turbulence(
        cls, coded: LayerForecastType
    ) -> Optional[Tuple[TurbulenceSeverity, TurbulenceLocation, TurbulenceFrequency]]:
        return _TURBULENCE.get(coded)

    @classmethod
    def low_cloud_layer(cls, digit: Optional[int]) -> LowCloudLayer:
        return cls._layer(digit, LowCloudLayer.NO_CLOUDS, _LOW_LAYERS, LowCloudLayer.UNKNOWN)

    @classmethod
    def mid_cloud_layer(cls, digit: Optional[int]) -> MidCloudLayer:
        return cls._layer(digit, MidCloudLayer.NO_CLOUDS, _MID_LAYERS, MidCloudLayer.UNKNOWN)

    @classmethod
    def high_cloud_layer(cls, digit: Optional[int]) -> HighCloudLayer:
        return cls._layer(digit, HighCloudLayer.NO_CLOUDS, _HIGH_LAYERS, HighCloudLayer.UNKNOWN)

    @staticmethod
    def _layer(digit, none, layers, unknown):
        if digit == 0:
            return none
        if digit is None or not 1 <= digit <= len(layers):
            return unknown
        return layers[digit - 1]

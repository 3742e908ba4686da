from __future__ import annotations

from marshmallow import Schema, fields, validate

from .abjad import AbjadSystem
from .normalize import HA, TA_MARBUTA

SYSTEMS = [s.value for s in AbjadSystem]


class NormalizationOptionsSchema(Schema):
    strip_diacritics = fields.Boolean(load_default=True)
    unify_alif = fields.Boolean(load_default=True)
    normalize_allah = fields.Boolean(load_default=True)
    ta_marbuta_as = fields.String(load_default=HA, validate=validate.OneOf([HA, TA_MARBUTA]))
    strip_tatweel = fields.Boolean(load_default=True)
    keep_spaces = fields.Boolean(load_default=True)


class AbjadQueryArgsSchema(Schema):
    name = fields.String(required=True, allow_none=False)
    system = fields.String(load_default=None, validate=validate.OneOf(SYSTEMS))


class LetterValueSchema(Schema):
    letter = fields.String(required=True)
    value = fields.Integer(required=True)


class AbjadResponseSchema(Schema):
    name = fields.String(required=True)
    arabic = fields.String(required=True)
    normalized = fields.String(required=True)
    system = fields.String(required=True)
    total = fields.Integer(required=True)
    saghir = fields.Integer(required=True)
    letters = fields.List(fields.Nested(LetterValueSchema), required=True)


class NormalizeRequestSchema(Schema):
    text = fields.String(required=True)
    options = fields.Nested(NormalizationOptionsSchema, load_default=None, allow_none=True)


class NormalizeResponseSchema(Schema):
    text = fields.String(required=True)
    normalized = fields.String(required=True)


class TransliterateQueryArgsSchema(Schema):
    text = fields.String(required=True)
    ta_marbuta_as = fields.String(load_default=HA, validate=validate.OneOf([HA, TA_MARBUTA]))


class TransliterationSchema(Schema):
    primary = fields.String(required=True)
    candidates = fields.List(fields.String(), required=True)
    warnings = fields.List(fields.String(), required=True)
    confidence = fields.Integer(required=True)


class ElementSchema(Schema):
    index = fields.Integer(required=True)
    key = fields.String(required=True)
    name = fields.String(required=True)
    name_fr = fields.String(required=True)
    name_ar = fields.String(required=True)
    symbol = fields.String(required=True)
    qualities = fields.String(required=True)
    temperament = fields.String(required=True)


class VerseSchema(Schema):
    reference = fields.String(required=True)
    arabic = fields.String(required=True)
    transliteration = fields.String(required=True)


class BurjSchema(Schema):
    index = fields.Integer(required=True)
    name = fields.String(required=True)
    name_ar = fields.String(required=True)
    transliteration = fields.String(required=True)
    element = fields.Nested(ElementSchema, required=True)
    modality = fields.String(required=True)
    planet = fields.String(required=True)
    planet_ar = fields.String(required=True)
    blessed_day = fields.String(required=True)
    verse = fields.Nested(VerseSchema, required=True)
    qualities = fields.String(required=True)


class PlanetSchema(Schema):
    index = fields.Integer(required=True)
    name = fields.String(required=True)
    name_ar = fields.String(required=True)
    day = fields.String(required=True)
    score = fields.Integer(required=True)
    flavor = fields.String(required=True)


class NameDestinyRequestSchema(Schema):
    name = fields.String(required=True)
    mother_name = fields.String(load_default=None, allow_none=True)
    system = fields.String(load_default=None, validate=validate.OneOf(SYSTEMS))
    options = fields.Nested(NormalizationOptionsSchema, load_default=None, allow_none=True)


class QuranResonanceSchema(Schema):
    surah = fields.Integer(required=True)
    ayah_hint = fields.Integer(required=True)
    url = fields.String(required=True)


class PersonalProfileSchema(Schema):
    mother_name = fields.String(required=True)
    mother_arabic = fields.String(required=True)
    mother_total = fields.Integer(required=True)
    combined_total = fields.Integer(required=True)
    element = fields.Nested(ElementSchema, required=True)
    burj = fields.Nested(BurjSchema, required=True)
    blessed_day = fields.String(required=True)


class NameDestinyResponseSchema(Schema):
    name = fields.String(required=True)
    arabic = fields.String(required=True)
    normalized = fields.String(required=True)
    letters = fields.List(fields.Nested(LetterValueSchema), required=True)
    kabir = fields.Integer(required=True)
    saghir = fields.Integer(required=True)
    hadath = fields.Integer(required=True)
    divine_name_number = fields.Integer(required=True)
    element = fields.Nested(ElementSchema, required=True)
    burj = fields.Nested(BurjSchema, required=True)
    quran = fields.Nested(QuranResonanceSchema, required=True)
    personal = fields.Nested(PersonalProfileSchema, allow_none=True)


class PersonInputSchema(Schema):
    name = fields.String(required=True)
    mother_name = fields.String(load_default=None, allow_none=True)


class CompatibilityRequestSchema(Schema):
    person_a = fields.Nested(PersonInputSchema, required=True)
    person_b = fields.Nested(PersonInputSchema, required=True)
    system = fields.String(load_default=None, validate=validate.OneOf(SYSTEMS))
    four_layer = fields.Boolean(load_default=True)
    options = fields.Nested(NormalizationOptionsSchema, load_default=None, allow_none=True)


class PersonProfileSchema(Schema):
    name = fields.String(required=True)
    arabic = fields.String(required=True)
    total = fields.Integer(required=True)
    element = fields.Nested(ElementSchema, required=True)
    planet = fields.Nested(PlanetSchema, required=True)
    mother_name = fields.String(allow_none=True)
    mother_arabic = fields.String(allow_none=True)
    mother_total = fields.Integer(allow_none=True)
    mother_element = fields.Nested(ElementSchema, allow_none=True)
    personal_element = fields.Nested(ElementSchema, allow_none=True)


class AffinitySchema(Schema):
    relation = fields.String(required=True)
    score = fields.Integer(required=True)
    description = fields.String(required=True)


class DestinyTierSchema(Schema):
    index = fields.Integer(required=True)
    name = fields.String(required=True)
    score = fields.Integer(required=True)
    description = fields.String(required=True)


class SpiritualDestinySchema(Schema):
    combined_total = fields.Integer(required=True)
    remainder = fields.Integer(required=True)
    tier = fields.Nested(DestinyTierSchema, required=True)
    includes_mothers = fields.Boolean(required=True)
    score = fields.Integer(required=True)


class ElementalTemperamentSchema(Schema):
    elements = fields.List(fields.Nested(ElementSchema), required=True)
    affinity = fields.Nested(AffinitySchema, required=True)
    score = fields.Integer(required=True)


class PlanetaryCosmicSchema(Schema):
    combined_total = fields.Integer(required=True)
    ruler = fields.Nested(PlanetSchema, required=True)
    planets = fields.List(fields.Nested(PlanetSchema), required=True)
    relationship = fields.String(required=True)
    score = fields.Integer(required=True)


class LayerComparisonSchema(Schema):
    elements = fields.List(fields.Nested(ElementSchema), required=True)
    affinity = fields.Nested(AffinitySchema, required=True)
    score = fields.Integer(required=True)


class FourLayerAnalysisSchema(Schema):
    available = fields.Boolean(required=True)
    reason = fields.String(allow_none=True)
    daily_life = fields.Nested(LayerComparisonSchema, allow_none=True)
    emotional = fields.Nested(LayerComparisonSchema, allow_none=True)
    cross_dynamic_a = fields.Nested(LayerComparisonSchema, allow_none=True)
    cross_dynamic_b = fields.Nested(LayerComparisonSchema, allow_none=True)


class CompatibilityResponseSchema(Schema):
    person_a = fields.Nested(PersonProfileSchema, required=True)
    person_b = fields.Nested(PersonProfileSchema, required=True)
    spiritual = fields.Nested(SpiritualDestinySchema, required=True)
    elemental = fields.Nested(ElementalTemperamentSchema, required=True)
    planetary = fields.Nested(PlanetaryCosmicSchema, required=True)
    four_layer = fields.Nested(FourLayerAnalysisSchema, required=True)
    four_layer_available = fields.Boolean(required=True)
    weights = fields.Dict(keys=fields.String(), values=fields.Float(), required=True)
    overall_score = fields.Integer(required=True)
    label = fields.String(required=True)
    recommendation = fields.String(required=True)


class IstikharaRequestSchema(Schema):
    name = fields.String(required=True)
    mother_name = fields.String(required=True)
    system = fields.String(load_default=None, validate=validate.OneOf(SYSTEMS))
    options = fields.Nested(NormalizationOptionsSchema, load_default=None, allow_none=True)


class IstikharaResponseSchema(Schema):
    name = fields.String(required=True)
    mother_name = fields.String(required=True)
    person_total = fields.Integer(required=True)
    mother_total = fields.Integer(required=True)
    combined_total = fields.Integer(required=True)
    burj = fields.Nested(BurjSchema, required=True)
    element = fields.Nested(ElementSchema, required=True)
    blessed_day = fields.String(required=True)
    repetition_count = fields.Integer(required=True)

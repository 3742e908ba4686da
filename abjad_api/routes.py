from __future__ import annotations

import logging

from flask import abort, current_app
from flask.views import MethodView
from flask_smorest import Blueprint

from .abjad import breakdown, get_table
from .classification import ELEMENTS, classify_buruj, classify_element
from .compatibility import CompatibilityOptions, NameInput, analyze_compatibility
from .destiny import analyze_name, istikhara
from .errors import InvalidIndex, InvalidInput
from .normalize import NormalizationOptions, normalize
from .reducers import digital_root
from .schemas import (
    AbjadQueryArgsSchema,
    AbjadResponseSchema,
    BurjSchema,
    CompatibilityRequestSchema,
    CompatibilityResponseSchema,
    ElementSchema,
    IstikharaRequestSchema,
    IstikharaResponseSchema,
    NameDestinyRequestSchema,
    NameDestinyResponseSchema,
    NormalizeRequestSchema,
    NormalizeResponseSchema,
    TransliterateQueryArgsSchema,
    TransliterationSchema,
)
from .transliterate import to_arabic, transliterate

logger = logging.getLogger(__name__)

blp = Blueprint("abjad", __name__, url_prefix="/", description="Abjad numerology endpoints")


def _system(args: dict) -> str:
    return args.get("system") or current_app.config["ABJAD_DEFAULT_SYSTEM"]


def _options(args: dict) -> NormalizationOptions | None:
    opts = args.get("options")
    return NormalizationOptions(**opts) if opts else None


def _check_lengths(**names: str | None) -> None:
    limit = current_app.config["MAX_NAME_LENGTH"]
    for field_name, value in names.items():
        if value and len(value.strip()) > limit:
            abort(422, description=f"{field_name} must be {limit} characters or less")


def _reject(exc: InvalidInput):
    logger.info("rejected input: %s", exc)
    abort(422, description=str(exc))


@blp.route("/abjad")
class AbjadValue(MethodView):
    @blp.arguments(AbjadQueryArgsSchema, location="query")
    @blp.response(200, AbjadResponseSchema)
    def get(self, args):
        """
        Abjad total of a name, letter by letter.
        """
        name = args["name"].strip()
        _check_lengths(name=name)
        system = _system(args)
        try:
            if not name:
                raise InvalidInput("name is required", field="name")
            arabic = to_arabic(name)
            letters = breakdown(arabic, get_table(system))
            if not letters:
                raise InvalidInput("name has no letters with an abjad value", field="name")
        except InvalidInput as e:
            _reject(e)

        value = sum(lv.value for lv in letters)
        return {
            "name": name,
            "arabic": arabic,
            "normalized": normalize(arabic),
            "system": system,
            "total": value,
            "saghir": digital_root(value),
            "letters": letters,
        }


@blp.route("/normalize")
class Normalize(MethodView):
    @blp.arguments(NormalizeRequestSchema)
    @blp.response(200, NormalizeResponseSchema)
    def post(self, payload):
        try:
            options = _options(payload)
        except InvalidInput as e:
            _reject(e)
        return {"text": payload["text"], "normalized": normalize(payload["text"], options)}


@blp.route("/transliterate")
class Transliterate(MethodView):
    @blp.arguments(TransliterateQueryArgsSchema, location="query")
    @blp.response(200, TransliterationSchema)
    def get(self, args):
        """
        Best-effort Latin -> Arabic spelling with alternates and a confidence.
        """
        _check_lengths(text=args["text"])
        return transliterate(args["text"], ta_marbuta_as=args["ta_marbuta_as"])


@blp.route("/name-destiny")
class NameDestinyView(MethodView):
    @blp.arguments(NameDestinyRequestSchema)
    @blp.response(200, NameDestinyResponseSchema)
    def post(self, payload):
        _check_lengths(name=payload["name"], mother_name=payload.get("mother_name"))
        try:
            return analyze_name(
                payload["name"],
                payload.get("mother_name"),
                table=get_table(_system(payload)),
                options=_options(payload),
            )
        except InvalidInput as e:
            _reject(e)


@blp.route("/compatibility")
class Compatibility(MethodView):
    @blp.arguments(CompatibilityRequestSchema)
    @blp.response(200, CompatibilityResponseSchema)
    def post(self, payload):
        """
        Compatibility of two people by the spiritual, elemental and planetary
        methods; adds the four-layer element analysis when both mothers' names
        are given.
        """
        a = payload["person_a"]
        b = payload["person_b"]
        _check_lengths(
            person_a_name=a["name"],
            person_a_mother_name=a.get("mother_name"),
            person_b_name=b["name"],
            person_b_mother_name=b.get("mother_name"),
        )
        try:
            options = CompatibilityOptions(
                system=_system(payload),
                normalization=_options(payload),
                weights=current_app.config["COMPATIBILITY_WEIGHTS"],
                four_layer=payload["four_layer"],
            )
            return analyze_compatibility(
                NameInput(a["name"], a.get("mother_name")),
                NameInput(b["name"], b.get("mother_name")),
                options,
            )
        except InvalidInput as e:
            _reject(e)


@blp.route("/istikhara")
class Istikhara(MethodView):
    @blp.arguments(IstikharaRequestSchema)
    @blp.response(200, IstikharaResponseSchema)
    def post(self, payload):
        _check_lengths(name=payload["name"], mother_name=payload["mother_name"])
        try:
            return istikhara(
                payload["name"],
                payload["mother_name"],
                table=get_table(_system(payload)),
                options=_options(payload),
            )
        except InvalidInput as e:
            _reject(e)


@blp.route("/elements")
class Elements(MethodView):
    @blp.response(200, ElementSchema(many=True))
    def get(self):
        return list(ELEMENTS.values())


@blp.route("/elements/<int:index>")
class ElementByIndex(MethodView):
    @blp.response(200, ElementSchema)
    def get(self, index: int):
        try:
            return classify_element(index)
        except InvalidIndex:
            abort(404, description="Element not found")


@blp.route("/buruj/<int:index>")
class BurjByIndex(MethodView):
    @blp.response(200, BurjSchema)
    def get(self, index: int):
        try:
            return classify_buruj(index)
        except InvalidIndex:
            abort(404, description="Burj not found")

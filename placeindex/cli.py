"""Command line entry point for the Amazon Location place index client."""
import argparse
from pathlib import Path
from typing import List, Optional

from placeindex import builders, presenter
from placeindex.config import DEFAULT_CONFIG_PATH, Settings
from placeindex.exceptions import PlaceIndexError
from placeindex.logs import LOG_LEVELS, build_logger
from placeindex.models import GeoPoint, SearchFilter
from placeindex.service import PlaceIndexService
from placeindex.validation import parse_tags, validate_geo_filters


def _csv_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _prepare_create(args):
    args.tag_map = parse_tags(args.tags)


def _prepare_search(args):
    bias, bbox = validate_geo_filters(
        lat=args.lat, lon=args.lon, x1=args.x1, x2=args.x2, y1=args.y1, y2=args.y2,
    )
    args.search = SearchFilter(text=args.text, bias=bias, bbox=bbox, countries=args.country or [])


def run_create(args, settings: Settings, service: PlaceIndexService, logger):
    resp = service.create_place_index(
        builders.build_create_index_args(settings, args.description, args.tag_map)
    )
    logger.info("Created index", extra={
        "createTime": str(resp.get("CreateTime")),
        "indexARN": resp.get("IndexArn"),
        "indexName": resp.get("IndexName"),
    })
    presenter.present_create(resp, settings.json_output)


def run_delete(args, settings: Settings, service: PlaceIndexService, logger):
    request = builders.build_delete_index_args(settings)
    resp = service.delete_place_index(request)
    logger.info("Deleted index", extra={"indexName": request["IndexName"]})
    presenter.present_delete(request["IndexName"], resp, settings.json_output)


def run_describe(args, settings: Settings, service: PlaceIndexService, logger):
    resp = service.describe_place_index(builders.build_describe_index_args(settings, args.index))
    presenter.present_describe(resp, settings.json_output)


def run_list(args, settings: Settings, service: PlaceIndexService, logger):
    resp = service.list_place_indexes(builders.build_list_indexes_args(settings))
    logger.info("Listed indexes", extra={"count": len(resp["Entries"])})
    presenter.present_list(resp, settings.json_output)


def run_position(args, settings: Settings, service: PlaceIndexService, logger):
    point = GeoPoint(latitude=args.lat, longitude=args.lon)
    resp = service.search_place_index_for_position(
        builders.build_search_position_args(settings, point, args.max_results)
    )
    logger.info("Searched position")
    presenter.present_search(resp, settings.json_output)


def run_suggestion(args, settings: Settings, service: PlaceIndexService, logger):
    logger.debug("Suggestion search", extra={"countries": args.search.countries})
    resp = service.search_place_index_for_suggestions(
        builders.build_search_suggestions_args(settings, args.search, args.max_results)
    )
    logger.info("Searched suggestion")
    presenter.present_search(resp, settings.json_output)


def run_text(args, settings: Settings, service: PlaceIndexService, logger):
    resp = service.search_place_index_for_text(
        builders.build_search_text_args(settings, args.search, args.max_results)
    )
    logger.info("Searched text")
    presenter.present_search(resp, settings.json_output)


def run_update(args, settings: Settings, service: PlaceIndexService, logger):
    resp = service.update_place_index(builders.build_update_index_args(settings, args.description))
    logger.info("Updated index", extra={"indexName": resp.get("IndexName")})
    presenter.present_update(resp, settings.json_output)


def _add_geo_filter_flags(parser):
    parser.add_argument("--lat", type=float, default=None, help="bias position latitude")
    parser.add_argument("--lon", type=float, default=None, help="bias position longitude")
    parser.add_argument("--x1", type=float, default=None, help="bounding box southwest longitude")
    parser.add_argument("--y1", type=float, default=None, help="bounding box southwest latitude")
    parser.add_argument("--x2", type=float, default=None, help="bounding box northeast longitude")
    parser.add_argument("--y2", type=float, default=None, help="bounding box northeast latitude")
    parser.add_argument("--max-results", type=int, default=None, help="maximum number of results")


def _add_common_flags(parser, root: bool = False):
    # Accepted before and after the subcommand; only the root parser sets defaults,
    # otherwise the subcommand's defaults would overwrite flags given before it
    defaults = {"json": False, "loglevel": "info", "config": DEFAULT_CONFIG_PATH}
    if not root:
        defaults = dict.fromkeys(defaults, argparse.SUPPRESS)

    parser.add_argument("-j", "--json", action="store_true", default=defaults["json"], help="output json")
    parser.add_argument("--loglevel", choices=sorted(LOG_LEVELS), default=defaults["loglevel"],
                        help="[error|warn|info|debug|trace]")
    parser.add_argument("--config", "--dotenv", dest="config", type=Path, default=defaults["config"],
                        help="path to the yaml config file")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    _add_common_flags(common)

    parser = argparse.ArgumentParser(prog="placeindex", description="Manage and search Amazon Location place indexes.")
    _add_common_flags(parser, root=True)
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    create = subparsers.add_parser("create", parents=[common], help="create a place index")
    create.add_argument("--index", required=True, help="index name")
    create.add_argument("--description", default="", help="index description")
    create.add_argument("--tags", type=_csv_list, action="extend", default=None, help="index tags (key=value,...)")
    create.set_defaults(handler=run_create, prepare=_prepare_create)

    delete = subparsers.add_parser("delete", parents=[common], help="delete a place index")
    delete.add_argument("--index", required=True, help="index name")
    delete.set_defaults(handler=run_delete)

    describe = subparsers.add_parser("describe", parents=[common], help="describe a place index")
    describe.add_argument("--index", default=None, help="index name (defaults to IndexName in the config file)")
    describe.set_defaults(handler=run_describe)

    listing = subparsers.add_parser("list", parents=[common], help="list place indexes")
    listing.set_defaults(handler=run_list)

    position = subparsers.add_parser(
        "position", parents=[common],
        help="search coordinate, get a legible address",
        description="Reverse geocodes a given coordinate and returns a legible address.",
    )
    position.add_argument("--index", required=True, help="index name")
    position.add_argument("--lat", type=float, required=True, help="latitude")
    position.add_argument("--lon", type=float, required=True, help="longitude")
    position.add_argument("--max-results", type=int, default=None, help="maximum number of results")
    position.set_defaults(handler=run_position)

    suggestion = subparsers.add_parser(
        "suggestion", parents=[common],
        help="search free-form text",
        description="Generates suggestions for addresses and points of interest based on partial "
                    "or misspelled free-form text (autocomplete).",
    )
    suggestion.add_argument("--index", required=True, help="index name")
    suggestion.add_argument("--text", required=True, help="text")
    suggestion.add_argument("--country", type=_csv_list, action="extend", required=True,
                            help="one or more ISO 3166 alpha-3 countries to limit the search to")
    _add_geo_filter_flags(suggestion)
    suggestion.set_defaults(handler=run_suggestion, prepare=_prepare_search)

    text = subparsers.add_parser(
        "text", parents=[common],
        help="geocode free-form text",
        description="Geocodes free-form text, such as an address, name, city, or region.",
    )
    text.add_argument("--index", required=True, help="index name")
    text.add_argument("--text", required=True, help="text")
    text.add_argument("--country", type=_csv_list, action="extend", default=None,
                      help="one or more ISO 3166 alpha-3 countries to limit the search to")
    _add_geo_filter_flags(text)
    text.set_defaults(handler=run_text, prepare=_prepare_search)

    update = subparsers.add_parser("update", parents=[common], help="update a place index")
    update.add_argument("--index", required=True, help="index name")
    update.add_argument("--description", default=None, help="index description (unchanged when omitted)")
    update.set_defaults(handler=run_update)

    return parser


def main(argv: Optional[List[str]] = None, client=None, logger=None) -> int:
    args = build_parser().parse_args(argv)
    if logger is None:
        logger = build_logger(args.loglevel)

    try:
        prepare = getattr(args, "prepare", None)
        if prepare is not None:
            prepare(args)

        settings = Settings.load(args.config, index_name=getattr(args, "index", None), json_output=args.json)
        service = PlaceIndexService(settings, logger, client=client)
        args.handler(args, settings, service, logger)
    except PlaceIndexError as e:
        logger.error(str(e), extra={"operation": args.command, "error": str(e)})
        return 1

    return 0

import pytest

from adventpuzzles.y2023_day05 import (
    AlmanacMap,
    Conversion,
    SeedRange,
    location_for_seed,
    lowest_location_for_range,
    lowest_location_for_ranges,
    lowest_location_number,
    parse_almanac,
    parse_conversion,
    parse_map,
    solve,
)

EXAMPLE = [
    "seeds: 79 14 55 13",
    "",
    "seed-to-soil map:",
    "50 98 2",
    "52 50 48",
    "",
    "soil-to-fertilizer map:",
    "0 15 37",
    "37 52 2",
    "39 0 15",
    "",
    "fertilizer-to-water map:",
    "49 53 8",
    "0 11 42",
    "42 0 7",
    "57 7 4",
    "",
    "water-to-light map:",
    "88 18 7",
    "18 25 70",
    "",
    "light-to-temperature map:",
    "45 77 23",
    "81 45 19",
    "68 64 13",
    "",
    "temperature-to-humidity map:",
    "0 69 1",
    "1 0 69",
    "",
    "humidity-to-location map:",
    "60 56 37",
    "56 93 4",
    "",
]

SEED_TO_SOIL = AlmanacMap(
    source="seed",
    destination="soil",
    conversions=[
        Conversion(source_start=50, source_end=97, difference=2),
        Conversion(source_start=98, source_end=99, difference=-48),
    ],
)

LIGHT_TO_TEMPERATURE = AlmanacMap(
    source="light",
    destination="temperature",
    conversions=[
        Conversion(source_start=64, source_end=76, difference=4),
        Conversion(source_start=45, source_end=63, difference=36),
        Conversion(source_start=77, source_end=99, difference=-32),
    ],
)


def test_lowest_location_number():
    assert lowest_location_number(EXAMPLE) == 35


def test_lowest_location_for_ranges():
    assert lowest_location_for_ranges(EXAMPLE) == 46


def test_lowest_location_for_range_is_no_lower_than_overall():
    almanac = parse_almanac(EXAMPLE[2:])
    assert lowest_location_for_range(SeedRange(79, 93), almanac) >= 46
    assert lowest_location_for_range(SeedRange(79, 79), almanac) == location_for_seed(
        79, almanac
    )


@pytest.mark.parametrize(
    "lines, expected",
    [
        (["seed-to-soil map:", "50 98 2", "52 50 48"], SEED_TO_SOIL),
        (
            ["light-to-temperature map:", "45 77 23", "81 45 19", "68 64 13"],
            LIGHT_TO_TEMPERATURE,
        ),
    ],
)
def test_parse_map(lines, expected):
    assert parse_map(lines) == expected


def test_parse_map_rejects_bad_title():
    with pytest.raises(ValueError):
        parse_map(["nothing here", "1 2 3"])


@pytest.mark.parametrize(
    "line, expected",
    [
        ("50 98 2", Conversion(source_start=98, source_end=99, difference=-48)),
        ("52 50 48", Conversion(source_start=50, source_end=97, difference=2)),
        ("45 77 23", Conversion(source_start=77, source_end=99, difference=-32)),
    ],
)
def test_parse_conversion(line, expected):
    assert parse_conversion(line) == expected


def test_parse_conversion_rejects_short_line():
    with pytest.raises(ValueError):
        parse_conversion("1 2")


def test_parse_almanac():
    lines = [
        "seed-to-soil map:",
        "50 98 2",
        "52 50 48",
        "",
        "light-to-temperature map:",
        "45 77 23",
        "81 45 19",
        "68 64 13",
        "",
    ]
    assert parse_almanac(lines) == {"seed": SEED_TO_SOIL, "light": LIGHT_TO_TEMPERATURE}


@pytest.mark.parametrize(
    "seed_conversions, soil_conversions, expected",
    [
        ([Conversion(70, 80, 1)], [Conversion(80, 90, -20)], 60),
        ([Conversion(70, 71, 1)], [Conversion(75, 90, -20)], 59),
        (
            [Conversion(0, 5, 1), Conversion(70, 80, 1)],
            [Conversion(5, 15, -20), Conversion(80, 90, -20)],
            60,
        ),
    ],
)
def test_location_for_seed(seed_conversions, soil_conversions, expected):
    almanac = {
        "seed": AlmanacMap("seed", "soil", seed_conversions),
        "soil": AlmanacMap("soil", "location", soil_conversions),
    }
    assert location_for_seed(79, almanac) == expected


def test_location_for_seed_missing_map():
    almanac = {"seed": AlmanacMap("seed", "soil", [])}
    with pytest.raises(KeyError):
        location_for_seed(79, almanac)


def test_odd_seed_range_count_rejected():
    with pytest.raises(ValueError):
        lowest_location_for_ranges(["seeds: 79 14 55"] + EXAMPLE[1:])


def test_solve_without_trailing_newline():
    assert solve("\n".join(EXAMPLE[:-1])) == (35, 46)
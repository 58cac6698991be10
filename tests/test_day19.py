from aoc2015.day19 import distinct_molecules, parse_input, part_one, split_elements

EXAMPLE = "H => HO\nH => OH\nO => HH\n\n{molecule}\n"


def test_split_elements_groups_lowercase_letters():
    assert split_elements("CaRnAl") == ["Ca", "Rn", "Al"]
    assert split_elements("HOH") == ["H", "O", "H"]


def test_split_elements_leading_lowercase_is_own_element():
    assert split_elements("e") == ["e"]
    assert split_elements("") == []


def test_split_elements_join_round_trip():
    text = "CRnSiRnCaPTiMgYCaPTiRnFArSiThFArCaSiThSiThPBCaCaSiRnSiRnTiTiMgAr"
    assert "".join(split_elements(text)) == text


def test_parse_input_reads_transforms_and_molecule():
    transforms, molecule = parse_input(EXAMPLE.format(molecule="HOH"))
    assert transforms == {"H": [("H", "O"), ("O", "H")], "O": [("H", "H")]}
    assert molecule == ("H", "O", "H")


def test_parse_input_skips_malformed_lines():
    transforms, molecule = parse_input("H => HO\nnonsense\n\nHO\n")
    assert transforms == {"H": [("H", "O")]}
    assert molecule == ("H", "O")


def test_parse_input_without_molecule_gives_empty():
    transforms, molecule = parse_input("H => HO\n")
    assert molecule == ()
    assert list(transforms) == ["H"]


def test_part_one_worked_examples():
    assert part_one(EXAMPLE.format(molecule="HOH")) == 4
    assert part_one(EXAMPLE.format(molecule="HOHOHO")) == 7


def test_distinct_molecules_differ_from_original():
    transforms, molecule = parse_input(EXAMPLE.format(molecule="HOHOHO"))
    results = distinct_molecules(transforms, molecule)
    assert molecule not in results
    assert all(len(result) == len(molecule) + 1 for result in results)


def test_distinct_molecules_no_matching_elements():
    assert distinct_molecules({"Ca": [("X",)]}, ("H", "O")) == set()
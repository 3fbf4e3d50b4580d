from ataraxis_dot_access import (
    BindingMode,
    DotAccessor,
    AccessorConfig,
    dot_get,
    dot_has,
    dot_set,
    dot_only,
    dot_pull,
    dot_remove,
    flatten_dictionary,
    unflatten_dictionary,
)

# A nested dictionary, such as the one produced by parsing a .yaml or .json file
session = {
    "animal": {"id": "A1", "weight": 21.5},
    "rig": {"name": "rig_1", "cameras": {}},
    "trials": [{"id": 1, "reward": 5}, {"id": 2}],
}

# Values are addressed by dot paths. List elements are addressed by their index.
assert dot_get(session, "animal.id") == "A1"
assert dot_get(session, "trials.1.id") == 2
assert dot_get(session, "animal.age", default=-1) == -1  # Missing paths return the default value

# Membership checks accept multiple paths and an optional wildcard token that matches any key at one level
assert dot_has(session, ["animal.id", "rig.name"])
assert dot_has(session, "trials.*.reward", wildcard="*")  # At least one trial has a reward
assert not dot_has(session, "trials.*.duration", wildcard="*")

# Writing modifies the dictionary in place and creates the missing sections
dot_set(session, "rig.cameras.face.fps", 30)
assert session["rig"]["cameras"] == {"face": {"fps": 30}}

# Removing and pulling values also modify the dictionary in place
assert dot_pull(session, "animal.weight") == 21.5
dot_remove(session, ["trials.1", "rig.cameras"])
assert session == {"animal": {"id": "A1"}, "rig": {"name": "rig_1"}, "trials": [{"id": 1, "reward": 5}]}

# Nested dictionaries can be flattened into single-level dictionaries and restored
flat = flatten_dictionary(session)
assert flat == {"animal.id": "A1", "rig.name": "rig_1", "trials.0.id": 1, "trials.0.reward": 5}
# Unflattening always creates dictionaries, so list elements are restored under their index keys
restored = unflatten_dictionary(flat)
assert restored == {"animal": {"id": "A1"}, "rig": {"name": "rig_1"}, "trials": {"0": {"id": 1, "reward": 5}}}
assert dot_get(restored, "trials.0.reward") == dot_get(session, "trials.0.reward")

# A subset of the values can be extracted into a new nested dictionary
assert dot_only(session, ["animal.id", "rig.name"]) == {"animal": {"id": "A1"}, "rig": {"name": "rig_1"}}
assert dot_only(session, "trials.0.id") == {"trials": {"0": {"id": 1}}}

# The DotAccessor class exposes the same operations through the standard indexing syntax. By default, it wraps a copy
# of the data.
accessor = DotAccessor(session, config=AccessorConfig(wildcard="*", default="n/a"))
accessor["animal.sex"] = "F"
assert accessor["animal.sex"] == "F"
assert accessor["animal.age"] == "n/a"
assert "trials.*.id" in accessor
assert "sex" not in session["animal"]

# When bound by reference, the accessor modifies the caller's dictionary
accessor = DotAccessor(session, config=AccessorConfig(binding=BindingMode.REFERENCE))
del accessor["trials"]
assert "trials" not in session

import dataclasses as dc

from .values import NULL

### ENVIRONMENT ###

# name -> Value store of one session
# written only by assignment operators, never emptied
# an undefined name reads as null

@dc.dataclass
class Environment:
    variables   : dict = dc.field(default_factory = dict)

    def __contains__(self, name):
        return name in self.variables

    def __len__(self):
        return len(self.variables)

    def lookup(self, name):
        return self.variables.get(name, NULL)

    def assign(self, name, value):
        self.variables[name] = value
        return value

    def pprint(self):
        return "\n".join(f"{name} = {self.variables[name].pprint()}"
                         for name in sorted(self.variables))

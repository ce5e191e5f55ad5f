from .maybe import Just, Maybe, Naught, Nothing, just, maybe, naught, nothing
from .nullable import Nil, Nullable, Solum, nil, nullable, solum
from .optional import Optional, Some, Vacant, optional, some, vacant

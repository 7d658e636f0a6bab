# cli.py
import argparse
import logging
import sys

from jsonschema import ValidationError

from .bootstrap import bootstrap
from .config import from_dict, load_config, validate_config
from .errors import MapBootError
from .view.mapview import DisplayHost, DisplaySurface
from .view.projection import inverse

ACTIONS = ("config", "print_center", "html", "png", "show", "verbose")

def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="mapboot", description="Set up a map with one marker")
    p.add_argument("--config")
    p.add_argument("--container")
    p.add_argument("--lon", type=float)
    p.add_argument("--lat", type=float)
    p.add_argument("--zoom", type=int)
    p.add_argument("--tiles")
    p.add_argument("--projection")
    p.add_argument("--label")
    p.add_argument("--print-center", action="store_true")
    p.add_argument("--html", help="write a Leaflet page")
    p.add_argument("--png", help="render tiles + marker to an image")
    p.add_argument("--show", action="store_true")
    p.add_argument("--verbose", "-v", action="store_true")
    return p.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        cfg = load_config(args.config)
        # JSON as defaults, CLI overrides
        cfg_dict = dict(vars(cfg))
        for k, v in vars(args).items():
            if k in ACTIONS: continue
            if v is not None: cfg_dict[k] = v
        validate_config(cfg_dict)
        cfg = from_dict(cfg_dict)

        host = DisplayHost([DisplaySurface(cfg.container, cfg.width, cfg.height)])
        context = bootstrap(host, cfg)

        if args.print_center:
            c = context.map_view.center
            g = inverse(c)
            print("# x,y,lon,lat,zoom")
            print(f"{c.x:.3f},{c.y:.3f},{g.lon:.8f},{g.lat:.8f},{context.map_view.zoom}")

        if args.html:
            from .view.export import save_html
            save_html(context, args.html)

        if args.png or args.show:
            from .view.renderer import PlotRenderer
            renderer = PlotRenderer(context.map_view)
            try:
                if args.png: renderer.save(args.png)
                if args.show: renderer.show()
            finally:
                renderer.close()
    except ValidationError as e:
        print(f"error: invalid config: {e.message}", file=sys.stderr)
        return 2
    except MapBootError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())

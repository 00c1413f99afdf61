from termplot.cli import main


raise SystemExit(main())

"""The fitted polynomial coefficients of the published water-water and water-ion
fits, in the order of the terms of the polynomial each was fit with."""


MBPOL_COEFFICIENTS = (
    7.832551386996325e+00,
    6.137897864547213e+01,
    1.798766797188997e+02,
    -7.839942322381600e+01,
    -5.210506199304373e+01,
    -3.994663298305017e+00,
    1.092480745585855e+01,
    2.935836455238271e+00,
    -7.757952003911277e+00,
    -2.425224922333037e+01,
    1.426931011477325e+00,
    -1.253067810456554e+01,
    1.499091322216989e-01,
    -7.633998030145180e+01,
    1.456133557092916e+00,
    -9.385851518014061e+00,
    -1.929715094457045e+01,
    4.570242344223167e+00,
    8.074407318781903e+00,
    -9.173375867507918e+00,
    -5.364306150209694e-01,
    -5.425084833370777e+01,
    -1.607031993610310e+00,
    1.656527998645836e+00,
    4.169227915091282e+01,
    -6.123341439358478e+00,
    -3.921761134377481e+00,
    -1.094420421820826e+02,
    -1.033493741838044e+01,
    1.830880701755060e+00,
    -3.828600143523920e+01,
    -6.155224494552493e+01,
    8.895822012979245e+00,
    8.097940944553670e+01,
    6.098993523458549e+01,
    2.138677333167251e+00,
    2.688686346060689e+00,
    9.427260123456676e+01,
    2.227583260558067e+01,
    3.920420560561956e+01,
    -1.996890382119360e+01,
    -4.725085517853018e+00,
    5.663375187766173e+00,
    -1.168790562647662e+01,
    6.174493189082303e-01,
    3.203733792477367e+02,
    2.181718186115986e+01,
    -7.549929137574643e+00,
    5.939711826368223e+01,
    8.934021948928660e+00,
    -8.094707515303755e+00,
    5.534268297094094e+01,
    -2.908960782337640e+01,
    7.768398817503095e+00,
    -6.741325000374783e+01,
    3.526983873782447e+00,
    -5.534097436497698e+00,
    -1.230030927607199e+02,
    1.009323400317015e+02,
    -7.002482795954832e+01,
    -1.394260056493270e+02,
    1.197270700757993e+02,
    1.937310199098437e+02,
    2.111438904689935e+01,
    2.139970371964630e+02,
    -1.246056275077503e+00,
    5.363839264357208e+00,
    -3.268973918587432e+02,
    4.540659623053999e+01,
    -7.460688692567373e+00,
    -1.149182513893551e+00,
    5.574122852307052e+01,
    -2.170472557690990e-01,
    -2.268970978593247e+00,
    8.012732488515441e-02,
    3.014722519025778e-01,
    -1.491103798460976e-01,
    3.395090319760058e+00,
    -3.145732550810992e-02,
    2.963867988789531e+00,
    1.243032296105406e+01,
    -3.378970334526584e+01,
    -3.217248567806825e-03,
    -3.265415270907243e+00,
    -3.007659286258467e+00,
    4.407271878652995e+01,
    -6.110855876423297e-01,
    -8.087253470874094e+00,
    3.967534740896316e-01,
    1.035479448603993e+02,
    1.760992392514364e+02,
    -1.738320642354094e+00,
    -7.800889774061514e+01,
    1.384843857376291e-01,
    1.880171942523485e-01,
    -2.140753621405904e+01,
    -2.409916439074609e+01,
    -1.312062452897410e+00,
    -5.999125139264914e+01,
    5.675541461430853e-01,
    1.883923040716645e+00,
    -3.755052947904272e+00,
    -4.234822685211084e+00,
    2.034502827535883e+00,
    1.801742206489307e+01,
    -9.962175476485523e+01,
    -3.025184772753843e-01,
    -1.622000906888283e+02,
    3.897443881956888e+00,
    -9.503492187269424e+01,
    2.592787828266840e+00,
    9.403701981982531e+00,
    -9.043664034099377e-02,
    -4.675289310602908e+00,
    -1.715497584216354e-02,
    7.664822043122441e-01,
    -2.094636467646331e+01,
    -5.004340418566139e+01,
    5.157642459127540e+00,
    -3.158186124767128e-02,
    -9.763265682959496e-02,
    -6.538520707483649e-01,
    1.424218813300146e-01,
    5.838180368659902e+01,
    2.368800194549486e-01,
    2.053837575665226e+01,
    1.164114600753403e+01,
    1.547114866871538e+01,
    1.671266402246336e+00,
    -2.038270415529239e+01,
    -1.684218336966149e+00,
    6.545313575754865e-01,
    1.095701058189120e-01,
    -7.904634761151795e-02,
    1.779687191929903e-01,
    1.265342973685417e+02,
    -7.233548714170462e-03,
    -3.518646413283942e+01,
    -1.201091384570350e+01,
    2.711218428140894e+01,
    -1.068357411390933e+02,
    6.113659790332782e+01,
    -4.687025912440291e+01,
    3.262360567097801e+01,
    3.117684858414167e+01,
    3.389329405780220e-02,
    9.805276096237103e+00,
    8.003365918160492e+01,
    -5.746578584263080e+00,
    -3.126468056509798e-02,
    2.358958684259357e+01,
    9.458707020842405e+01,
    -1.493782173177485e+00,
    -8.298422011547532e-03,
    -1.051006352350195e+01,
    9.534314893602978e-03,
    5.827203300711427e+01,
    -1.276559327002832e+00,
    -2.003353730677165e+01,
    -4.437549760965094e-01,
    -8.942644358644249e-01,
    -1.239298182211595e+00,
    -5.172006684017586e+00,
    5.526519904277389e-01,
    -5.214826832108125e-01,
    -1.251435401209433e+02,
    -8.029650666569589e+01,
    3.263654887555291e+00,
    -6.107701938979547e+01,
    1.372310352584248e+00,
    4.665241937630666e+01,
    -4.097061860274001e-02,
    5.319170548829180e-01,
    -2.994023837335916e+01,
    -2.535780321447407e-01,
    2.646768871226873e+02,
    -1.416971017679291e+00,
    -3.733920496699698e+01,
    1.980990886643740e-01,
    4.474154614535784e-01,
    -1.406979798759887e+00,
    -1.318755247393729e+01,
    -2.376184452154926e-01,
    8.161388511363488e+01,
    -9.550817088966794e+01,
    -2.490357702672333e-03,
    1.080695241130366e+00,
    -1.110646327858891e+02,
    1.260795796400829e-02,
    2.427560652002630e+01,
    -1.382512861493908e-01,
    -8.422357906159049e-01,
    -1.270874383267034e-02,
    4.021297160462763e+00,
    -1.130116719781862e+00,
    -6.130152324702380e-01,
    8.019588362327048e-01,
    -1.070651249443909e-01,
    -4.403091952869543e-01,
    -4.495338548742326e-01,
    2.504144562823849e+01,
    -1.087191621424846e+01,
    3.181556833766158e+00,
    8.464291289716770e-01,
    6.305630900837715e+00,
    -7.377723898737448e+00,
    1.926621146449472e+00,
    1.374633663715851e+02,
    -5.625696091106061e+01,
    -1.818968492887796e-01,
    9.549270959391157e+00,
    7.609017871393399e-01,
    1.970911502896740e+00,
    1.170145539926940e+00,
    -3.222351818107218e-01,
    -9.993255385473774e-04,
    1.107098501169585e+02,
    -1.474605026503804e-02,
    -1.535511193097425e+00,
    -3.698473802798817e-03,
    6.576338652631401e+01,
    -2.046873774250415e-02,
    -3.704108740652651e+01,
    -1.044749414323985e+02,
    -1.544717522628573e-01,
    1.637879429003370e-01,
    1.355500348160650e+02,
    1.807963645363681e+01,
    3.155334507041031e+00,
    2.476637111169107e+02,
    -1.282688183078145e+00,
    2.097648686038975e-01,
    -4.313644096963809e-01,
    6.037611974496232e+01,
    4.876490463320928e-01,
    -1.191271012764338e+02,
    1.675341336556648e+02,
    -3.705433215659573e-03,
    2.347545603858072e+00,
    1.448664361993616e+00,
    1.458792425984085e+01,
    -1.148394264696029e+00,
    -3.532976098517852e-01,
    1.075319899786511e+00,
    1.157574614952704e-02,
    6.954131346062532e+00,
    -3.605501632348740e-01,
    2.119069927036647e+01,
    1.534816284739505e+00,
    4.810377779917071e+01,
    3.694707954743530e-01,
    -1.161283682127054e+00,
    8.836396126069733e+00,
    -3.586544382431377e+01,
    -8.526265907151432e-01,
    -9.846990219173686e-01,
    -3.359810235241284e+01,
    -1.583153682951723e+00,
    -3.492743326832242e-01,
    -1.311056246992306e+00,
    7.349106600216308e-03,
    -3.061391252590886e+00,
    -5.964562335481687e-01,
    8.655401607532236e-02,
    2.063582807398585e+02,
    8.002359710636469e+01,
    7.004078431485783e-03,
    -7.965191874523541e+01,
    -1.085689227608063e+01,
    2.149107493825396e+01,
    -4.584565352113422e-01,
    -4.452324714581364e-02,
    6.013671260821728e-01,
    5.433557378586883e+01,
    -2.213007284232322e+01,
    -3.620766488807581e+00,
    -7.371052632358636e-02,
    1.782803112450780e+01,
    1.939921452413612e+02,
    -8.295130713956095e+01,
    -1.163405243017683e+00,
    -5.919248067841039e-04,
    2.166689307422634e+01,
    -1.314505852054261e+00,
    -2.087304933294059e+00,
    -7.870452171055250e+00,
    3.755456769227835e+01,
    5.007973610371047e-01,
    -4.249184086181153e-05,
    6.575174042128673e+00,
    -2.079373481096493e+00,
    1.175368492712388e+00,
    1.683418723979145e+01,
    7.843202301372544e+01,
    -4.702074633479649e+01,
    6.865741310981173e-02,
    5.747596483130288e-01,
    1.551117114352467e+01,
    4.438007788921044e+01,
    -5.702499971337380e+00,
    7.920471502591110e-02,
    -1.514754567554540e-02,
    1.300346728410930e-02,
    2.477288198732035e-01,
    8.150941218151310e-02,
    -1.615861595931967e+00,
    -8.860035017893896e+00,
    -3.608197810789768e+01,
    2.098696808440961e+00,
    -3.129363449779999e+00,
    -6.076178839483434e-06,
    -1.815861090201502e+01,
    1.619449182609442e+01,
    -4.478088706856229e-01,
    -5.810331456237689e+00,
    2.722366910202047e-02,
    -6.024422588802070e+01,
    5.133671559092459e+00,
    -4.945323784575854e+00,
    2.536916469737054e-01,
    -7.652997430636554e+00,
    -5.413669580916588e+00,
    1.754240230505612e+01,
    -7.458705403549970e+01,
    1.003112591707118e+01,
    -1.486812220077427e+02,
    -5.462302408263682e-02,
    2.722668561621407e-02,
    -3.219829726230058e-02,
    -3.277286721293480e-01,
    1.474712145444653e+02,
    -6.135306265032056e-01,
    6.492496177020427e-01,
    -2.210738026327968e+01,
    -2.244011121991858e+01,
    -5.197989816352838e+00,
    1.557659864940533e+00,
    -3.590978563559249e+00,
    -1.902593164234708e+02,
    -2.988650538160161e-02,
    -1.902105788346319e+00,
    2.359234402308117e+00,
    8.159395169106284e+00,
    -1.506484395258568e+01,
    -2.972480806708754e-01,
    3.369915748372350e-02,
    -1.128732827286465e-01,
    1.091550759912192e+02,
    9.122134420446148e+00,
    -1.868221601177148e+01,
    -9.044129667193274e-01,
    -3.106279868819332e+00,
    4.785476747001258e-01,
    -2.903672713992594e-05,
    2.327402303546987e+00,
    -6.934314223959137e+01,
    -1.660352673591393e+00,
    -1.501541471803449e+01,
    1.266209813074985e+01,
    -1.091932987015305e+02,
    -1.841912920847630e+02,
    -6.844340651628706e-03,
    6.971877829952396e+00,
    -1.100320561143838e+01,
    -1.694549258236605e-01,
    3.558886603905885e+00,
    -1.934787116124005e-01,
    6.715021602360319e+01,
    -1.501646142244661e+00,
    2.752175043750008e+00,
    4.927310229515508e+00,
    2.383923157782827e-04,
    2.890187257042649e+00,
    -1.003150821025619e+02,
    1.161321015361442e+00,
    1.169135704336023e+02,
    1.829806417512073e-02,
    -7.544509793633342e-01,
    1.900418252093231e+02,
    2.366171891248096e-01,
    1.820007186350477e+01,
    -7.246316236075276e-01,
    9.870142234576665e-01,
    -4.533075674101353e+00,
    -1.746062171280300e+02,
    -5.821575373737998e+01,
    3.613008806013197e-02,
    1.371644673001524e+02,
    1.704191572943774e+01,
    -1.341497605116022e+02,
    -3.566245755267443e-01,
    -4.276391174267781e+01,
    -3.964283765113721e-01,
    2.506003349697718e+01,
    4.129340112308941e-03,
    -1.367895852213591e+02,
    7.581608616469026e+01,
    5.177329948748897e+01,
    -1.552521526929499e-01,
    -3.819785605829221e+01,
    3.127689190822245e+01,
    2.064197808264725e-03,
    -1.480002276782493e-04,
    -1.451383735794164e+01,
    1.095467819833560e+00,
    -3.133049471407391e-01,
    -2.175975898993249e+02,
    7.519761113191808e+01,
    3.024673259952351e-01,
    1.528329914582447e+00,
    2.615220965259130e+01,
    1.258951245050138e+01,
    1.791497687134955e-02,
    2.299747899665654e+01,
    -6.255934719428136e+00,
    2.700851171501027e+01,
    6.001392866218295e-03,
    9.221718912345178e+00,
    8.691224830084848e-04,
    1.792210943249589e+02,
    1.903762684197920e-01,
    1.378727784071324e+02,
    1.140211209190933e-02,
    -2.044047500909154e+01,
    3.137035167239688e+00,
    -8.823788435053672e-01,
    -5.770455644662110e-01,
    -6.507112347845364e+01,
    -1.249523126171929e+00,
    2.061285287886397e+01,
    7.610355215230417e+00,
    2.412906830545707e+00,
    1.465472626735905e+01,
    -5.844240500984061e+00,
    -7.257032314704964e-01,
    2.205820402304416e+00,
    5.098387302595021e-01,
    4.316997662898007e+00,
    2.123458598537317e-01,
    7.819239584112239e-02,
    -6.429414180410307e-01,
    -7.512573326130925e+00,
    -2.228324646462588e+00,
    -2.383824631532038e-02,
    -5.860837217074647e+01,
    -2.133778309904123e+01,
    3.533230227866158e+00,
    -8.169505305701243e+01,
    7.601500058538680e-01,
    -1.774273360998872e+02,
    -3.088723141627122e-02,
    -8.062729932072624e-04,
    9.344949492747184e-02,
    -3.739146011422852e+00,
    -3.005698851917741e+01,
    -2.952069794924677e+01,
    -8.191248145701927e+01,
    -8.445650833418012e+00,
    5.238865343606549e+01,
    2.146092064475963e+01,
    2.056212600177092e+01,
    7.549102380019736e-02,
    9.440934693508489e-01,
    -1.103707958858964e+01,
    -2.980584698191593e+01,
    -3.707483591250823e+01,
    7.458050816104448e+01,
    2.102258371937965e+00,
    1.784482768633701e-03,
    -7.797192946787296e-02,
    -1.039313501886298e-02,
    -1.924682612189293e+01,
    -3.207238813036891e+02,
    -1.944961744043141e+02,
    -1.640904433596370e+02,
    8.420231006115487e-01,
    -9.509532036634404e+01,
    4.903801914912574e+01,
    5.172627648554833e+00,
    -1.177644324389016e-02,
    3.417506524700097e-02,
    -1.868044688569088e+00,
    -8.480411065637863e+00,
    -2.679266933119748e-03,
    1.436856567181074e+01,
    -3.650646538117204e-01,
    -1.009451940315673e+00,
    1.793880000732866e+02,
    -5.741263140011338e+01,
    9.883237389885448e+01,
    2.129433350225432e+00,
    -3.759685540764868e+01,
    6.966624526758605e+01,
    -1.199997649939574e-02,
    4.768666294149792e-04,
    -5.809521254788246e+00,
    1.338539466049344e+02,
    3.616812331767312e+00,
    7.950946260903032e+01,
    -1.398889044291828e-02,
    1.394228254241360e-01,
    4.125131457651250e-01,
    1.252589452427830e+01,
    2.341754178551955e-03,
    7.545819924726320e+01,
    1.467309979747833e-01,
    -1.570056084006402e-02,
    1.506484144440766e+00,
    1.599618509904874e-01,
    1.705614762249340e+02,
    -2.105015132678406e+01,
    3.554362199204409e+00,
    -1.059692422312236e+01,
    1.362549170274769e-03,
    3.076413323002648e-02,
    -3.431357708592919e+00,
    -1.470903077724314e+01,
    -1.000050867558424e+00,
    -3.653763646207106e+01,
    -1.908604379952718e+01,
    -2.893186536576098e+00,
    4.980897621733800e+00,
    1.926554459439625e+02,
    -6.210390964749501e-01,
    1.176807878497552e+02,
    9.045489876916224e-03,
    -1.961713708427663e+02,
    9.722745302460704e-01,
    -2.347395621732081e+01,
    -5.240338365513774e-01,
    1.273477033560875e+01,
    7.718034355758532e-02,
    2.327855096259171e-01,
    -2.073938016306372e-02,
    3.103288117741936e+00,
    -4.607892449323960e+01,
    -1.097887450750012e+00,
    1.141000627342025e+01,
    -7.123939398254156e+01,
    1.095266515862879e+02,
    7.861965618499328e-02,
    4.955652464733351e-01,
    -3.377428172955801e+00,
    7.929737309501663e+00,
    -6.216937073156008e-01,
    2.622202139643352e+00,
    -3.797908276800752e+00,
    -1.334643029348670e+01,
    -1.250468281726644e+02,
    7.492165376856285e+01,
    1.901002454087140e+00,
    -3.879546811172830e-03,
    -2.617709092261101e-01,
    9.279366641588813e-01,
    -1.176582245691152e+01,
    -1.485163065350554e+02,
    6.696984729564015e+01,
    -5.030963265617255e+01,
    5.813150511509078e+01,
    3.766286784284196e+00,
    2.652334434585588e+01,
    1.056336944454371e+00,
    5.451815384209804e-01,
    -2.162024647443116e+00,
    4.954332179661588e+01,
    -1.031602530985993e-02,
    2.153677877697190e+01,
    -1.849562189649678e+00,
    3.345087157892890e+00,
    4.111515448209190e-01,
    -2.022339929151257e-01,
    -2.751565624601795e+00,
    -1.955554388600738e-02,
    2.704304217335617e-01,
    1.396123519136204e+00,
    -9.287771610089207e+01,
    1.026830131217192e-01,
    -2.896841174922692e-03,
    6.139575805593801e+01,
    -2.687188156164738e+01,
    -3.862914135503994e+00,
    1.962658428026759e-01,
    -1.752257410182547e+01,
    -4.912603886062675e-01,
    2.625039077234784e-02,
    -7.239151796615890e+01,
    2.617275866422434e+01,
    1.632722503074159e+01,
    -1.033510285195171e-03,
    -2.957409181484127e+01,
    5.997599768096196e-01,
    5.861124026841678e-02,
    4.528679102556163e+01,
    8.725169017093988e-02,
    2.825118639324063e+00,
    2.636112061472642e+00,
    -7.704782151605362e-02,
    8.961945980695633e+01,
    2.209832439092995e-01,
    -5.004567370969963e+01,
    -1.357242919338445e-02,
    -1.314532536727448e+00,
    2.326149094823661e+00,
    -5.653662329402416e-02,
    -1.270665827433288e-01,
    -2.951940893991542e-01,
    -3.106626759702694e-01,
    6.231348317140077e+01,
    5.098798050635470e-01,
    4.186774133579554e+00,
    -2.558579158084501e+00,
    -4.044646715643711e+01,
    7.566246608434366e+00,
    -2.030334333602268e+01,
    -1.726559801368108e-01,
    5.867803214455398e-01,
    1.547508541847944e+01,
    2.542556462052958e+02,
    -4.032058606402240e-02,
    9.880876741562491e+01,
    7.083726280132113e-02,
    -4.379143175209569e+00,
    6.174588621954949e-03,
    5.081273584560468e+01,
    -2.484682001064188e-01,
    1.509096077905999e+00,
    -4.834273809703314e+00,
    -4.634138128848450e-01,
    -4.054994139962230e-01,
    1.713852268192123e+01,
    1.966029615406848e+02,
    -5.218233026824304e+00,
    4.730477224476375e+00,
    -6.017939227852100e+01,
    5.519774763286587e+01,
    3.175266079516037e-01,
    9.663699425557330e-02,
    1.953676124961879e+01,
    -7.814404987441870e+01,
    -4.745980913823422e-01,
    9.319954799044832e+01,
    1.979741662952239e-01,
    2.708135760051580e-02,
    -3.797903336486915e-01,
    -7.507588413150917e+00,
    -8.132698699971447e+00,
    -2.854006519133762e-01,
    3.128715052544238e+00,
    -5.868822096434657e-01,
    -1.113815120257408e+00,
    8.886202561621630e+00,
    7.449131772502188e-02,
    -2.158079884828330e+00,
    -3.330020607573140e-01,
    -1.682688766131595e-01,
    -8.813178442051868e+01,
    5.142216818504075e+00,
    -1.212085594601385e+01,
    -6.138407641350999e-02,
    4.217957328282667e-02,
    -1.433990032269788e+00,
    2.053799687993601e-01,
    1.263194962757974e-01,
    1.187132896803754e+02,
    -8.213286917436671e-02,
    -1.352551927273397e+00,
    3.276530482934393e-01,
    1.560105804711903e+00,
    1.371591408230951e+01,
    -9.775097499246027e+01,
    9.311685776293388e+00,
    1.417209170545397e-01,
    2.339527184519664e-01,
    -6.625436673958827e-01,
    -2.419002602232075e-01,
    -4.814268476488460e-01,
    4.542729165277182e-02,
    -9.745336761276938e-03,
    6.399441509607958e+01,
    -4.618590064000817e+01,
    1.281259126623325e+02,
    -1.865330637966804e-02,
    2.486463746944619e-01,
    1.055611700446093e-01,
    1.723802568153281e+01,
    -4.868773293434438e-01,
    -7.085110186071200e+00,
    -2.100151000805737e-03,
    3.897278777853994e-02,
    4.744891923658233e+00,
    -1.732447413117931e+00,
    8.274155358094081e-01,
    3.885574378433923e-01,
    1.201289924851435e+01,
    -3.089184348381895e+01,
    -3.437711770344480e-02,
    -9.489492458723749e-01,
    -4.028481970145126e-01,
    -1.513076018555997e+01,
    -7.447028480243587e+01,
    1.922123945277565e-01,
    1.067826056589318e+02,
    -1.589042917191324e+00,
    4.731860995868531e-01,
    -1.485173569729498e-01,
    -2.574394563273000e+01,
    -2.631847131723959e-02,
    7.261315528426401e+00,
    -2.217726104708288e-01,
    -1.060722919260499e+01,
    -1.931943571454267e+00,
    4.707449603530686e-02,
    -4.982851031207991e+01,
    -1.295330761457953e+00,
    -1.618260147087590e-01,
    -1.257894784044551e-01,
    -1.980890904070063e-01,
    -2.063210343106004e+00,
    -6.524186613018631e+01,
    -6.084612966019647e-02,
    2.050660311608447e+00,
    1.326536868318449e-01,
    2.073109114736424e+00,
    -2.029016692935870e-01,
    5.386975167852760e+00,
    1.481507688564372e+00,
    -1.488046281230049e-02,
    9.044628591018626e-01,
    3.361636615346583e+00,
    9.728043499321098e-01,
    -5.058595182777106e+00,
    7.943358367948257e+01,
    -2.224203785038031e+00,
    -6.881862122959974e+00,
    3.078891020526529e-01,
    1.742364327284812e-01,
    4.102198981968619e-01,
    8.121104440962240e+00,
    9.028487817964828e-01,
    -1.297413990275464e-01,
    -7.264998032414850e-01,
    -3.332610991330177e-01,
    -6.692255738619384e+01,
    2.268197852251623e+00,
    1.675002608612670e-01,
    3.158580867030208e+01,
    3.637179086926910e-01,
    2.391800796943564e+00,
    -8.830846237270419e-01,
    6.784929608778669e+00,
    -2.404519461786299e-02,
    1.746358790613158e+01,
    1.582533443784660e+00,
    1.694808277861700e-02,
    6.894033784615630e+01,
    -2.726992485436673e-01,
    -1.885883131319025e+00,
    2.631173239537578e+01,
    2.861430976189002e-02,
    -2.494434912216298e+01,
    5.553505709930447e-02,
    -5.487576759761652e+01,
    9.977833802651227e-01,
    5.987847128085409e+00,
    -8.882205984999857e-03,
    7.147126750363321e+01,
    3.017192468512619e+00,
    -3.369780251481744e-02,
    2.830021426639219e+01,
    7.463122168684349e-01,
    -2.784024076473691e+00,
    -4.468346227784163e+00,
    2.911528357430358e-02,
    -6.679682791452071e-02,
    -5.142379672832242e-01,
    1.643961816744670e-01,
    1.978033070389948e+01,
    -4.159011361431059e-03,
    -1.778175835677019e-01,
    -2.006355684759656e-01,
    -6.100543665449387e-02,
    1.046868839377014e+01,
    6.986019489249315e-01,
    -4.526680641168419e-01,
    -2.570792570047121e+01,
    -1.279213247132171e+01,
    9.551504911994185e-01,
    1.084177937090279e+00,
    2.184686362598251e+01,
    1.720852635553380e-01,
    -6.230123032114573e-01,
    3.105689086923322e-01,
    6.478975502207113e+01,
    -1.959292835069026e-01,
    5.697781567307452e-02,
    -2.283155401230113e+00,
    -5.966383085009873e-04,
    -4.166612770003092e-01,
    -2.633987075933053e+01,
    -9.044286986868311e+00,
    4.872852869194837e-02,
    -2.226184346205662e+00,
    3.820553144946112e+01,
    -2.315046800981137e-02,
    -2.567193198934303e-01,
    1.033839356375295e+00,
    -1.281969164476767e-01,
    2.119139010009940e-03,
    4.805069639436216e+00,
    -1.699676321584515e-01,
    3.061714847321495e-01,
    5.315210018004210e+01,
    -4.724318500158459e+00,
    1.268983533605457e+00,
    -1.563486375665205e+00,
    -2.241144668515808e-01,
    3.611190049877776e+00,
    -5.317774609180988e+01,
    -5.790046472110994e+00,
    -2.297005169558322e-01,
    -3.446343270225004e-01,
    2.637012199534798e+01,
    -1.258315233866819e-02,
    1.170483385075014e+02,
    5.539239316659986e-02,
    -5.952350602050602e-01,
    -1.298550116540120e-01,
    1.320628571461778e+00,
    -7.348525760469263e+01,
    3.221445754163654e+00,
    -1.901217444091281e-01,
    -2.943473188567516e+00,
    5.267417477554875e+00,
    7.716828831243706e+01,
    -3.971548152512190e-02,
    -1.090451748330038e+02,
    4.901743049571733e-01,
    1.887796264145865e+01,
    -3.139832969201663e-02,
    -9.985679250821539e-02,
    5.193585751036421e+01,
    -3.466300530929085e+00,
    -1.751314025089186e+00,
    -4.481889814832560e+00,
    -2.828420474615911e-01,
    -7.503502546881222e-02,
    -1.281951265676867e+01,
    1.616818213072524e+01,
    -3.231860978812265e+01,
    -1.266809326360554e+00,
    -3.017310136828220e-01,
    -6.549393992202897e-01,
    -3.507053364845612e-01,
    -2.732544466404723e-02,
    4.246788461053380e+00,
    -2.822310143936404e+00,
    -4.122733608789610e-01,
    -1.748173907856204e+01,
    -1.484981404708002e+01,
    1.975083502702721e+00,
    -2.190366277432296e+01,
    -1.055923744371541e+01,
    2.883822628158587e-01,
    8.403625946492944e+00,
    2.786214419554230e-02,
    -1.326867093949969e-01,
    -4.142926955349886e+00,
    3.178259515623406e+01,
    -2.425239721418772e-02,
    -4.354022394588731e+00,
    -7.832837989978353e-02,
    8.698613605341541e-01,
    5.129365682325104e+00,
    2.759371233114460e+01,
    -1.694011495433750e+00,
    1.051535265964056e-05,
    -6.462985952066164e-01,
    -8.720623039461220e+00,
    -6.711203872517765e+01,
    3.768219072957492e+00,
    -1.549726421448374e-01,
    -1.474943103835276e+01,
    -1.581578700778702e+01,
    1.911459222499589e-01,
    2.981381709204389e-01,
    -1.253789896445243e+01,
    5.157655021391475e-02,
    2.692944723853942e-01,
    -8.783612099698878e+00,
    -5.234108838373220e+00,
    5.361897832739785e-01,
    -3.374945176021414e+01,
    1.525540552041188e+00,
    7.863980055291427e-02,
    1.532932445932340e+01,
    3.630409396183403e-01,
    1.119892623977742e-01,
    6.727082065040716e+01,
    2.135225055339777e+00,
    -1.594667442111334e-01,
    -1.406230060575998e+02,
    3.679532387355046e+01,
    6.506605742913758e+00,
    -1.886021036295957e-01,
    4.680182164724567e-01,
    -2.069154364911831e-01,
    8.339197807621957e+01,
    -6.419447203497027e-01,
    1.171281309378642e+00,
    9.841650636692414e-02,
    -4.165365253300824e+01,
    1.730896210974160e+01,
    4.524149905580855e-02,
    6.397966200287748e+00,
    -8.237103201827026e+00,
    2.628949014878565e-01,
    9.856454685736329e-03,
    2.428013145799532e+01,
    5.613745490419843e-02,
    -1.366382944875315e+00,
    -1.445579675118408e+00,
    3.424723107859182e-01,
    -1.726772771307961e+02,
    4.911826338225115e+00,
    -2.708314259163625e+02,
    -9.011931070277188e-01,
    6.834178885671326e+00,
    -2.063728660606050e+00,
    9.889816346454889e-01,
    2.584387487890317e+01,
    -1.961807018448654e-01,
    -5.812981417913910e+01,
    4.723839697001353e+00,
    -2.602570459133419e+00,
    2.479538835526929e+00,
    1.223905606128930e+00,
    5.598205930885086e-02,
    6.018651997570558e-01,
    7.340531598364707e+00,
    1.096848312234155e+00,
    -4.967750716278831e+00,
    4.015087261310656e+00,
    -2.391644270764874e+01,
    1.164668715763810e+02,
    -1.079716841459888e-02,
    -3.646608756453689e-01,
    -2.775181344908647e-01,
    4.225837856991754e+00,
    1.271640281933485e-01,
    -3.023257267358227e+01,
    1.317682455272484e-01,
    4.751050934104493e-02,
    -1.598425744409931e+02,
    -4.202116317725513e-01,
    7.771932478115205e-01,
    1.238902198830985e-01,
    8.891087358012314e+01,
    5.259701735573916e+01,
    -3.456568601778222e-02,
    -4.088852746408875e+01,
    3.476806177795893e+01,
    2.195273719448012e-02,
    1.377054796523926e+01,
    -2.638234165742815e+00,
    2.283190693365562e-01,
    -6.079808182815665e+01,
    -9.914428792923660e+01,
    2.324578063786960e-01,
    -3.215900548629580e-01,
    1.753067630033766e-01,
    3.680935490740941e-01,
    -7.292336684514360e-01,
    -1.892582149899777e-01,
    4.890117859606154e-01,
    -9.924726701594308e-02,
    8.791260376735896e-02,
    1.058830060557437e+01,
    -2.002932202808728e+01,
    -9.755203816836935e-01,
    -2.260976748726830e-01,
    4.523024081396174e+00,
    1.815860453919855e+01,
    8.261481911240988e-01,
    6.679768215753062e+01,
    2.117102815551387e-02,
    -3.453192794951858e+01,
    6.391815672842215e+01,
    3.190841732232922e+00,
    -4.160984960599464e-01,
    -2.622591905605268e-01,
    -1.524619792071420e+00,
    4.908630337397826e-02,
    1.375975151762782e-01,
    1.131548127302969e-01,
    2.628641355407702e-01,
    -7.955573229558887e+00,
    -3.857643676190168e+01,
    -7.418033108489932e-03,
    -2.813790103402055e+01,
    1.323782136473282e-01,
    8.504882249549508e-01,
    -2.448614420088641e-01,
    2.856860068818294e+00,
    -3.419976764027896e+01,
    1.870826758861098e+01,
    1.902953612704008e-01,
    -1.113932504560623e+02,
    -2.209552026853531e-01,
    4.316079765991173e-02,
    7.792614306106895e-01,
    2.644124876499101e-01,
    3.772724137483284e-01,
    -5.256578120944654e+00,
    -1.665713546621686e-01,
    4.670965024376204e+01,
    5.805411575771998e+00,
    -1.352144469803762e-01,
    1.374303139350045e-01,
    6.822595945771944e+00,
    -2.004870309642120e-01,
    -7.910807493009386e+01,
    -2.560327427798165e+01,
    9.621445952770443e+00,
    -2.742296098588659e-02,
    2.803703388041692e+01,
    -9.215549318652433e-02,
    1.168457719033896e-01,
    2.952024896927490e-03,
    -5.466244432955993e+00,
    -1.004338072253257e-01,
    -4.015134082610058e-02,
    3.349273162416199e-01,
    1.203769773872290e-02,
    -2.280201610459190e-01,
    -2.266011093166224e-01,
    2.693186144367233e-01,
    1.292015413281684e+00,
    -7.311285320581250e-01,
    -4.706057253856204e-01,
    6.547916504439310e+01,
    4.058406153046940e-01,
    -1.568978731671831e-01,
    7.955350866077073e-01,
    7.671906845664097e+01,
    -1.864232610361673e-02,
    1.709897848508735e-01,
    -1.039419781836381e+01,
    1.542809379252928e-01,
    -1.772705341848704e-01,
    5.232737183941151e-01,
    1.135881568168288e-01,
    -1.857884608293104e-02,
    8.771354498024677e+01,
    -2.024993477469181e+01,
    -2.456049052163152e+01,
    -7.852026015166602e-03,
    -7.457845095075391e-01,
    -3.051096110359556e-01,
    -1.303753350684433e+01,
    6.717083355003233e+01,
    6.786547669990765e+01,
    1.078811097378346e+02,
    -7.487074914079996e+01,
    -4.430872839210367e+01,
    -1.973230237611513e+00,
    1.283390914658215e+01,
    1.436145014343586e+00,
    5.124818387580059e-01,
    1.438407085873884e-01,
    -8.494745586542820e+00,
    -2.478265875326957e+00,
    -5.533674940667552e-01,
    -2.222049409327537e+01,
    -1.232541961629145e+00,
    -1.378559733917466e+01,
    2.134212365303669e-02,
    7.975222141495535e+00,
    1.947783857564901e-01,
    -6.590534062866027e-02,
    -7.446673370825257e-01,
    -1.773653523812863e+01,
    -1.574039852759397e-01,
    1.154568664128096e+02,
    4.077366614398601e-01,
    6.058629282499643e+01,
    5.735031821614970e+00,
    1.287244606698774e+01,
    8.972693300150107e+00,
    9.461731703228866e-01,
    3.770840395697334e-01,
    -5.209084224321019e-04,
    2.016969208432047e-02,
    2.606516487301353e+01,
    -3.715478603899320e+01,
    1.636079909388601e+00,
    -4.780024696233453e-01,
    4.485379444992227e+01,
    3.543082773972279e-02,
    -1.997439789356867e+01,
    1.670554309396994e-01,
    -1.025698145277279e+01,
    3.304178820771832e-02,
    -2.214524552612426e+01,
    -4.472094093633118e+01,
    -7.843725979380752e+00,
    3.676892404535590e+00,
    6.168566820913009e+00,
    -2.535343341700006e-02,
    2.203583160175888e-02,
    -2.793266883125836e+00,
    2.434389988050379e-01,
    -1.287555062737244e-01,
    -4.830964350311815e-03,
    -4.958369075863692e+01,
    -1.217507179237039e+00,
    -8.069695185985854e+00,
    6.046271593699291e-02,
    -7.048812081096729e-02,
    2.094083245142395e+01,
    9.760872901764019e+01,
    -7.775567772448345e+00,
    3.702194014647192e-01,
    -9.117518400135806e+01,
    -9.973585063892926e-02,
    -1.300831300995172e+00,
    1.716401711355345e-01,
    -1.178723321445317e+02,
    4.050320881911354e-01,
    -3.743787075996361e-01,
    2.904116379210401e-01,
    -1.651238507300621e+02,
    -3.093477140076714e+00,
    -4.875910614305632e-01,
    4.845739524996125e+00,
    -1.580278730812439e+01,
    1.116946878413564e+02,
    -2.907755316147156e+01,
    1.143370740769241e+02,
    -3.900682106207473e-01,
    5.377077910027745e+01,
    -2.647447536284292e-01,
    -2.146364446376714e+01,
    1.501037580349408e-01,
    1.047661973539622e-02,
    -3.032513054209905e-01,
    6.137219524460383e-01,
    5.919640806022328e-02,
    1.422792475097124e+00,
    6.838143285744047e+01,
    -4.509251327397191e+01,
    -1.523573933088222e-01,
    -8.806271551499056e+01,
    -1.637656207819073e+00,
)


H2O_BR_POL0_COEFFICIENTS = (
    2.099911490487774e+02,
    -4.270474050856164e+02,
    1.141169325279117e+02,
    1.435313431772710e+02,
    4.532695933942335e+02,
    -1.895637848313392e+01,
    7.306551700694378e+02,
    -5.191961481854613e+02,
    -1.346024576330687e+02,
    -1.769826336552325e+02,
    -8.544401404675277e+01,
    1.626998302398061e+02,
    3.763968535503512e+02,
    -4.780005237711242e+02,
    -5.709808666178494e+02,
    5.496141897795825e+01,
    -5.195739254204595e+02,
    8.790794812012484e+01,
    2.785104578795243e+02,
    1.133084457909239e+02,
    4.791637503796567e+02,
    3.569940198524319e+02,
    7.021838459984995e+00,
    5.842352725980977e+01,
    -1.960897443508604e+02,
    1.093676900562188e+03,
    1.084543490023325e+02,
    2.190600834286962e+02,
    1.020105930216965e+02,
    -1.258570457029468e+02,
    1.138613903513463e+02,
    2.965377263488955e+00,
    3.437759387216269e+01,
    2.367203117823786e+02,
    -9.113665292082636e+02,
    2.621389242452431e+01,
    -6.455165233209998e+01,
    -3.875142894701284e+02,
    2.069419442364964e+00,
    -1.174879561021920e+02,
    1.303821512956870e+01,
    -3.836318363322674e+02,
    -1.350900899223512e+01,
    4.582055301967380e+01,
    -6.512725424224483e+01,
    -6.614417038815917e+01,
    1.555221800248965e+01,
    1.062471550154020e+03,
    -9.979192120546137e+02,
    1.587517307334635e+02,
    -4.001052371199406e+00,
    -4.240643451623033e+01,
    1.325064378849300e+02,
    1.570043898867152e+02,
    -2.617667533042608e+02,
    -1.847134558322151e+02,
    1.411772868170387e+01,
    6.884976801749602e+01,
    -8.746878951110283e+01,
    -9.530407531320060e+01,
    -3.771221936517504e+02,
    -1.162252118125729e+02,
    1.595609132261478e+01,
    -2.384700954759631e+02,
    -2.942543429801270e-01,
    -1.393722214854140e+02,
    -1.312262983816558e+01,
    -1.185581831471331e+02,
    -1.483389033300795e+01,
    2.764301914251456e+00,
    -1.156173849299114e+01,
    1.227956464088171e+00,
    4.749278416253991e+01,
    -7.394208618155757e+01,
    1.880073061400250e+02,
    -1.945084835335760e+02,
    -7.067174380985779e+00,
    -7.567861165386779e+01,
    -1.837641960247569e+02,
    3.649996269774474e+02,
    9.078532855899399e-02,
    -5.776853680679815e+01,
    4.341519185964950e+01,
    6.234962046905657e+00,
    -5.444532242523682e+00,
    -2.358453317062497e+00,
    4.130313402969500e+01,
    7.541836209428268e+01,
    1.342655448911121e+02,
    3.183616567903636e+01,
    -5.824797498575155e+00,
    8.322552900043963e+00,
    4.419102893968038e+00,
    -4.558015722142159e+02,
    -2.713186126391845e+01,
    7.209116044211752e+00,
    -5.858318247155521e-01,
    -4.381851454947152e+01,
    -1.414651156320693e+01,
    -5.279195282375459e+02,
    -1.015884691448636e+02,
    7.316548373022822e+00,
    -4.947604832460581e+01,
    -1.930430968756242e+00,
    -4.776520106676981e+01,
    -1.766614212681481e+02,
    -3.969814742908662e+01,
    -9.138692993437024e+01,
    -1.478345954352384e+02,
    -1.868441343707985e+02,
    -1.192804328680626e+00,
    -1.062439288405511e+00,
    -7.269561716780825e+01,
    -7.192082503533149e+00,
    -1.978168222587016e+01,
    -8.496547860715442e+01,
    1.897332000275427e+00,
    1.678284612794055e+02,
    -5.829651179050371e+01,
    -5.650827516187386e+01,
    -1.751581570196698e-01,
    2.326907908148371e+01,
    1.312693378407518e+00,
    -8.173454229144862e-01,
    -6.022601058071406e+01,
    8.685085198535410e-02,
    8.114845019594462e-02,
    -1.131677442614252e+02,
    3.560442784997675e+00,
    -1.287441100476528e+02,
    1.400584408812770e+02,
    -1.467082523362699e+01,
    1.198822383267651e-01,
    -4.507719442018283e+02,
    3.799428001188679e+01,
    1.790456367944976e+01,
    2.956677399533482e-01,
    7.535952010877480e+01,
    -4.152104683341776e+02,
    1.433365615844368e+02,
    -3.836007902034920e+00,
    -4.479619516197937e+00,
    5.461062932819713e+01,
    9.340406440626631e+01,
    1.790561271448809e+02,
    -6.900076319395512e-01,
    -1.511016408931318e+01,
    -4.365130917682951e+01,
    3.195808339621516e+02,
    -6.456300696485497e+00,
    -1.386470389611271e+01,
    3.283002233114014e-02,
    -8.379989809738214e-01,
    3.834537179211644e+00,
    -7.136490483672443e-01,
    3.660527706160326e-01,
    -1.359595274302189e+02,
    1.682718777151732e+02,
    -4.062312304998691e+00,
    -1.566057770507613e+01,
    9.466156064885345e-01,
    6.719166104330558e+00,
    2.875875562138967e+02,
    2.353916782012868e+02,
    -1.558231417492624e+02,
    6.714763281782955e+01,
    1.562697678059000e+01,
    -2.158550332260337e+00,
    9.237976319800140e+01,
    -2.485255244824515e+02,
    -3.310610156190215e+01,
    -4.245106374364018e+01,
    5.403374681264453e+02,
    3.908128137937545e+02,
    -1.992515811312689e-01,
    5.777301897498623e+00,
    -2.296093841555224e+00,
    -5.845601644100179e-03,
    3.415204343263814e+02,
    -6.430137481372845e-01,
    1.292689013091602e+01,
    3.278333673326489e+02,
    -1.101311043955697e-01,
    3.371140212164546e-01,
    9.560728128280621e+01,
    3.377908735000561e+00,
    -1.546806381219859e-01,
    3.418986637149223e+02,
    -1.050432011243438e+00,
    -2.372966734896786e-02,
    1.348411156009297e+02,
    -1.913918332724182e+02,
    3.080543723240360e+00,
    1.975096184038506e-01,
    -1.037539369650309e+02,
    -1.188402843751364e+01,
    9.413321668970999e-02,
    -7.350035362347258e+01,
    -3.462096569810819e+01,
    1.377738634903702e+00,
    -1.601960416502958e+02,
    -8.178245792083345e+00,
    4.860396337242611e+00,
    3.169589563520466e-02,
    1.807361100119689e+01,
    1.535646665178944e+01,
    -3.627702254716894e+02,
    6.039370026719256e-01,
    2.768596146360074e+01,
    -2.282825751379875e+01,
    4.894627134772379e-02,
    -2.452955950456037e-01,
    7.400363839160001e+00,
    -1.144901167063000e+00,
    1.172906228681931e+01,
    1.825646690162628e-02,
    2.045950658928032e+00,
    -2.243626649860275e+02,
    7.773437380343922e+00,
    -3.425954340366878e-01,
    1.406052215811781e+01,
    1.279947622211064e+00,
    4.833405603145427e+00,
    -1.268019336362187e+01,
    -3.686609932188503e+00,
    2.785510090680650e+02,
    8.111735642790169e-01,
    8.031869800996348e-02,
    5.328030819036798e-01,
    1.262218691788634e+00,
    3.235372652203307e+01,
    4.277255533742018e+01,
    2.957657348554453e+01,
    -2.213541789700124e-01,
    3.565319794986003e+01,
    -2.975731519671103e-02,
    1.282715010090675e+01,
    4.479419820476143e-02,
    1.663033578624453e+01,
    5.168404531910389e+00,
    -2.144283696554017e+01,
    -1.866210351783745e+00,
    -2.679158435716525e-01,
    3.880836702884823e+01,
    1.803890019197273e+00,
    8.813385131281200e-02,
    -6.058488910080873e-02,
    -2.271562856607223e-01,
    -3.121254461515198e+01,
    -5.301922964459535e-02,
    -2.090584787394552e-01,
    -3.672310527531050e-02,
    -9.274351510938810e-01,
    -4.313583245648621e+00,
    1.384774646335883e+02,
    8.919862812451815e-02,
    8.561378481985525e-01,
    2.687167267210741e+01,
    -1.511322666393536e-01,
    1.891218383429045e+01,
    1.322136101704825e+02,
    7.034833704567392e+00,
    7.340525296849610e-01,
    4.359223956781642e-01,
    3.684637448418731e-01,
    -4.460519462602413e+01,
    5.256206428662368e+00,
    -5.391988642419738e+01,
    2.974671734804614e-01,
    1.368839593342983e-01,
    4.076257085191294e+01,
    1.490219441277873e-01,
    3.642834414933573e+00,
    5.512939566386096e-02,
    1.531680673186566e-01,
    5.479765495943983e-02,
    -4.409001471783682e+01,
    -5.532624786091031e-02,
    -1.202861528991457e+02,
    1.184221599455443e+02,
    4.954293202368984e+00,
    1.308782646050902e+02,
    -6.947475947208311e+01,
    4.467884044197839e+00,
    -4.578071782137823e+00,
    -5.061163066839329e-03,
    5.656981408042793e-01,
    -5.231145472470043e+00,
    -1.257352584316893e-02,
    -9.329626504790894e-01,
    7.064320778663900e-01,
    -3.051602953364907e-01,
    -4.528907746172434e+00,
    -3.802713997985290e-02,
    -1.461073983041659e+02,
    1.245542875805877e+02,
    -6.945583614443692e+01,
    4.176255323448269e+01,
    2.923725405136930e+00,
    -8.529729901130630e-01,
    -6.210877409502734e-01,
    -4.536998400976087e+00,
    -6.833944136170961e-01,
    -6.544746154250835e+00,
    6.715902902712131e-01,
    8.960883431970518e+01,
    -2.535014562551085e+01,
    2.149556177334678e-01,
    1.710265104300842e+02,
    -1.950982602924346e-01,
    -2.377671473003886e-01,
    8.347668788375121e-03,
    -1.663292628336924e-02,
    -1.841249616436209e+01,
    3.507618533730073e-02,
    -1.804574104826236e-01,
    -8.147995555195701e+00,
    1.554507787514702e+00,
    2.455741675399241e+00,
    6.985615665369050e-01,
    6.280402476554923e-01,
    3.043894730126510e-01,
    1.115199851999792e+01,
    -1.880144563578880e-02,
    -3.091136533016201e+01,
    -4.557970285081498e+00,
    -1.826264879005222e+00,
    3.947229206138796e+00,
    -3.794367029742251e+02,
    7.763797341823478e-02,
    9.577899092081761e-02,
    -1.433523666170377e+00,
    -1.636539986487833e+01,
    -3.012184615479464e-02,
    1.209398859685624e+02,
    -1.265185427757567e+00,
    -1.303320652185977e-01,
    -2.379713362437142e+00,
    -4.516183126504590e-01,
    -4.828382836933658e+00,
    6.759077810588998e-01,
    -2.819323254259203e+00,
    -4.758712589849846e-01,
    -2.622766970331986e+01,
    6.545826253877678e+00,
    2.322115194672490e-01,
    -6.123557636363235e+00,
    -5.095840652960875e+00,
    -1.256346489504103e+00,
    3.874760774391241e-02,
    -3.076453025319454e-01,
    -1.084538382233440e+00,
    -5.066557011683367e+00,
    6.842893183901609e+00,
    -6.842650671370973e-01,
    9.292748535286690e+01,
    4.987488844143191e+01,
    1.010352043163217e+00,
    7.659979507194102e+01,
    -4.934713737337814e-03,
    1.715245691252154e+01,
    -2.007916800933747e-01,
    -7.388178262222538e+00,
    3.640431610729479e-01,
    -5.463926151340109e+00,
    1.261240383698944e-01,
    2.809240356881678e-01,
    -8.726877344881487e+01,
    1.480118032201930e+01,
    5.931710618938319e+01,
    -1.275248168797422e+00,
    7.532406179772709e+02,
    -2.120962612428252e+00,
    -3.829386848882054e-01,
    1.450470367547163e+01,
    1.128041201499419e+00,
    -5.643220510412437e+01,
    3.907370230038466e+01,
    -4.741558897028948e-01,
    -8.454462268195957e-01,
    4.757310943022652e+00,
    -4.860471879244251e+01,
    1.505129553655873e+00,
    2.017781898705338e-01,
    -1.289428470982153e+02,
    1.631473821338350e+01,
    -4.252686439688716e-02,
    -4.786733765271741e+02,
    -4.304350016363268e-01,
    -1.914399591997088e+00,
    -1.330248902273394e+02,
    -6.915924585908759e+00,
    -4.523125715475144e+01,
    -2.529303806405293e-01,
    3.399306209020225e-01,
    -1.821153149483920e-01,
    2.545293209049488e+01,
    -1.594468551576019e-01,
    -6.812375371321203e-01,
    -2.483021965828419e+00,
    -1.853429747391041e+00,
    1.711342667877688e+00,
    -7.157472772364147e-02,
    -1.681469664876086e+00,
    3.495705625770166e-03,
    3.725151372689905e-02,
    -6.883215515866039e-01,
    -2.643394932071886e+00,
    -1.313311174019055e+01,
    2.195492847130801e-03,
    -3.061431211338337e-01,
    -7.938503355526551e+00,
    1.434784119720624e-04,
    -1.543242237946420e+02,
    -3.671786156919332e+00,
    3.419692714110547e+00,
    -2.385485712119160e+01,
    -4.713920933393961e+01,
    9.974873831510145e+01,
    -1.702439163980928e+01,
    1.562219237566780e+00,
    7.213238551406292e+01,
    -1.027793083772419e-01,
    -6.512868448537750e+00,
    5.235563144741348e-01,
    -6.595660556386451e-02,
    -6.292996483411406e-02,
    -1.274949323985538e+01,
    5.210684213014147e+00,
)


H2O_BR_POL50_COEFFICIENTS = (
    1.320257448835526e+02,
    -3.628061758145657e+02,
    8.376240442636178e+01,
    1.736653242640375e+02,
    5.674098676790977e+01,
    -1.406249428327392e+01,
    5.752782978022306e+02,
    -2.191385943531075e+01,
    -1.537158100134117e+02,
    -1.470240651835454e+02,
    -1.635709278326090e+02,
    1.500666044933216e+02,
    1.538498850810483e+02,
    -3.437553273649442e+02,
    -2.480697412339525e+02,
    1.246049174448417e+02,
    -4.827840794539125e+02,
    2.219168706797919e+02,
    2.205861976276959e+02,
    -8.113629283051594e+01,
    1.919228407496882e+02,
    2.186741734552524e+02,
    2.452489647388732e+00,
    3.596556180416191e+01,
    -9.549177273576967e+01,
    8.004964826477293e+02,
    1.187582651080821e+02,
    3.959354400805157e+02,
    2.391498846426312e+02,
    -3.376523909277149e+02,
    7.975107646145198e+00,
    2.631646924632971e+01,
    5.125372474331561e+00,
    4.842480808186613e+02,
    -5.711367528479975e+02,
    -1.261773216905417e+02,
    -8.519081507617424e+00,
    -4.121046829274271e+02,
    -5.519622524064960e+01,
    -3.867413824675504e+01,
    3.500700943619233e+01,
    -7.091872597836046e+01,
    -6.584190656201216e+01,
    7.419807196503234e-01,
    -2.209285097132480e+02,
    -1.024869712893227e+02,
    2.033836499777318e+01,
    3.707441817995902e+01,
    -4.708703184559772e+02,
    2.346465083781241e+01,
    -4.530990029442059e+00,
    -3.175165554773904e+01,
    4.177900354725102e+01,
    1.486960320051836e+02,
    -6.710483650331381e+01,
    -2.107146330479472e+02,
    7.737471590109050e+01,
    2.182565564781289e+02,
    2.710429798789387e+01,
    -2.310261727277644e+02,
    -4.507975181074769e+01,
    4.531966811797606e+01,
    1.361446921042147e-01,
    9.696770547741263e+00,
    -1.225363399233612e+01,
    1.902559770276166e+01,
    -1.091023030266575e+02,
    -6.772928949785521e+01,
    -2.124240304516011e+02,
    4.149313798152256e-02,
    -1.660557700788023e+02,
    2.330053429929685e-01,
    3.835856676314239e+01,
    -8.828296999494691e+01,
    3.970979660521172e+01,
    2.729334518329446e+01,
    -3.276264359315122e+00,
    -4.939938975500372e+01,
    -9.713462835292795e-01,
    5.310768872993382e+02,
    1.589450740843693e+00,
    -1.460709695486813e+02,
    2.131539918392347e-01,
    9.674285657640206e-01,
    7.928622716122101e-02,
    3.944571622190483e-04,
    -4.595552948296001e+02,
    1.581778411703954e+01,
    5.457012933071347e+02,
    6.634125147338725e+00,
    -8.883367664114768e+01,
    1.536624669652580e+02,
    -8.794290287201531e+01,
    -1.912971041685276e+02,
    7.086847046600104e+01,
    -5.641312286915623e+01,
    3.643429419674335e+01,
    -1.613533315666290e+02,
    -2.558616043483545e+02,
    -4.461379975127199e+02,
    -2.767841607428375e+01,
    -1.527133846917684e-01,
    -7.092538720274401e+00,
    -3.417409026531350e+01,
    -1.411029031007950e+02,
    -3.109563220646026e+01,
    -1.042175759418272e+01,
    2.932933225460688e+02,
    -2.908355503160265e+02,
    8.915629066360731e+00,
    -1.698498333075126e+00,
    2.501143123595670e+01,
    -4.829547070354830e+01,
    -8.881602819185853e-02,
    -1.536974972926518e-01,
    1.184121449359411e+01,
    -7.292380341264838e+01,
    1.398758533770615e+02,
    -1.404258527435186e+01,
    -8.123056624456946e+01,
    2.286544595421048e+01,
    2.044549699045493e+02,
    -1.741319645835035e+01,
    3.506999138653814e+01,
    -1.517448429715801e+02,
    -3.481575943783407e+00,
    -1.707385774736150e-01,
    -1.178652189433161e+02,
    5.507228897653530e+01,
    9.436420698320327e-02,
    -5.691072466463404e+01,
    5.261260752051738e+00,
    3.147547922505350e-01,
    -1.716271833617677e+01,
    7.851514569328236e+01,
    8.978655110779074e+01,
    4.839376742604221e-01,
    -7.523877843968405e-01,
    -2.908804195046118e+02,
    4.203537083012902e+01,
    -9.233904006858384e-01,
    -1.435943159967114e+01,
    3.829116751429612e+01,
    1.141217882999163e+02,
    2.278788746432305e+02,
    1.179953833228197e+01,
    -1.956387310859249e+01,
    -8.355148696139750e+00,
    4.928297150834439e+01,
    9.991524013636602e+01,
    -4.389960187142240e+01,
    6.244933689574556e-01,
    -6.867222959664757e+00,
    5.867088285604291e+00,
    9.178668810843629e+00,
    1.528507202384350e+00,
    -1.976773816067021e+02,
    1.386315928879392e+01,
    -4.400000039392399e+00,
    -1.045646744267739e+00,
    -1.129292164625668e+01,
    7.411671504776089e-03,
    2.786448317093675e+00,
    2.471857318829915e+01,
    3.104552001372275e+01,
    1.343809921327789e+01,
    5.211092004973469e+01,
    2.491260876625205e+01,
    1.224681382113573e+01,
    -3.761900649242698e+01,
    -2.346906208520255e+02,
    -3.791570734502908e-01,
    3.096164813181415e+01,
    5.922076286446235e+01,
    7.946015393029354e-01,
    1.555049772855526e+00,
    -6.662767249847059e+00,
    4.263197230198963e-01,
    1.452532880042382e+02,
    3.590840016912701e-01,
    1.373090523459560e+02,
    2.733326251716334e+02,
    3.841894470549394e+00,
    -1.587260085434934e+00,
    5.023836160154810e+02,
    8.337930279534335e-03,
    1.781627438018446e-02,
    2.929198087589422e+02,
    5.419533721926882e-02,
    -1.872895106520043e+00,
    7.887116556532852e+01,
    1.774793273982453e+02,
    -1.584717658779162e+00,
    -2.093212541246356e+00,
    -3.664277114884327e+01,
    -1.376449157309367e-01,
    -3.897539179298466e-01,
    -2.833018751789773e-01,
    -8.325107637263055e+01,
    2.295713715777489e+00,
    -2.102812055644306e+01,
    -1.314798291931506e+00,
    2.190921042385906e+00,
    -5.174775525578159e+00,
    2.980751383634309e+00,
    2.940899744383035e+01,
    -5.284463950165764e+02,
    -2.473619945940892e-02,
    3.833250474361411e+02,
    -1.817488675379371e+02,
    -1.902029956048355e-01,
    -1.684578623845605e+01,
    6.440891036462979e-03,
    5.337926482701858e+00,
    1.750251790062434e+01,
    5.174542570654850e-01,
    1.414892068996391e+01,
    -3.402181836343114e+01,
    2.048951038332160e-01,
    6.823647698070211e-01,
    2.583309044536990e-01,
    -8.132686743258782e+00,
    -4.734255491133278e+01,
    -1.497485905541904e+01,
    -2.442001633516138e+00,
    1.592431101434430e+02,
    -6.498470258348236e-02,
    1.274744420049847e-05,
    -3.076529464952154e-01,
    3.511209335317229e-01,
    4.677103345335813e+00,
    1.428738730317009e+02,
    3.566790368669120e+00,
    2.722425940408904e-03,
    -2.429265425686596e+02,
    4.333845848050217e-02,
    3.548009049559580e+02,
    6.700992528977167e+00,
    7.036507468314844e-01,
    -5.627426726011672e+01,
    -5.400780965311475e+01,
    -1.233644781030034e+00,
    -3.335044134051239e-01,
    8.397042869096944e+01,
    4.307730356326078e-04,
    3.014576831221901e-01,
    -9.930684920889916e-01,
    6.550958438345725e-02,
    -1.994632785525629e-01,
    -1.506442462399342e-01,
    4.015698579818400e-02,
    -1.595267557045160e+00,
    1.528088730166091e+00,
    2.990718028696365e+00,
    2.643868188695176e+02,
    -6.205776684532198e-01,
    4.649585686520499e-02,
    2.871700158243418e+01,
    1.516822103713668e+00,
    -7.461590608819846e+01,
    -8.901861661826138e+01,
    -3.983660658932472e+00,
    6.506845584127217e+01,
    8.869904420834895e-01,
    -1.926343730081335e-01,
    -1.135595715583325e+00,
    1.859098298201267e-03,
    -4.644638196560317e+00,
    4.129373794417393e+01,
    7.808661460989685e+00,
    5.439134531068150e+00,
    1.317872368173599e+01,
    -3.336968493988473e+01,
    9.551517160745655e+00,
    1.118945000884928e+01,
    3.669527871101153e+00,
    1.085416233560470e+01,
    1.074004479336670e+00,
    -1.778962044707249e+01,
    5.507038694526070e-02,
    8.230164993414089e-03,
    1.593406189207653e+01,
    -1.408586879168756e+01,
    9.311609085094258e+00,
    -1.160643404299241e+00,
    -8.778026436896118e-01,
    -7.883666129190048e-01,
    -1.948129013300244e+00,
    -6.319331376936513e+01,
    -4.495729430822749e-03,
    -2.957288212491552e-02,
    -3.575391694525356e+01,
    -1.743960354400933e+02,
    -4.425585231397910e+00,
    -1.524180931514242e+02,
    2.469952871338988e+01,
    -8.229973706074563e+00,
    3.368617675069868e+02,
    5.818028467514001e-01,
    -4.196294726057009e+01,
    -3.440716820694194e+00,
    2.149175148534076e+01,
    3.044180220892883e-05,
    -5.142674741420604e+01,
    -6.584439890471013e-01,
    -7.928309076675506e+00,
    1.530756868375833e+01,
    -4.077428496222747e-04,
    1.138433678886359e+01,
    4.199373319471041e-05,
    1.398146378369118e+01,
    1.220959629629205e+00,
    3.246598695851588e+01,
    -8.951126383908247e+01,
    3.838878572106755e+00,
    -7.067987139790780e-01,
    -1.069505818584037e-02,
    7.645527409518218e+01,
    1.853114814167859e-03,
    5.729354858756203e-02,
    -6.413814632285952e+00,
    2.760589305420962e+01,
    6.474641663806525e-03,
    2.118051069160660e-02,
    1.857881142038675e+02,
    -8.474129214230622e+00,
    -7.527617866611158e-01,
    1.528497815317008e+02,
    -1.809694362395586e+02,
    8.799703058627126e-02,
    -2.195769105906530e+00,
    -4.020298721626546e+00,
    -3.167666970800534e+00,
    -8.925438836278309e+00,
    7.503827012179943e+00,
    9.220765198668322e-03,
    -1.982814147247497e-01,
    -2.466091613615723e-03,
    1.791800882595660e+00,
    1.790193595906519e+01,
    3.647760148742591e+01,
    -5.935935877184466e-03,
    4.083237169581061e+00,
    -4.333303487303606e+01,
    1.346912556932381e+00,
    -2.601671617102982e+00,
    -1.306771586467025e+02,
    -1.349045507046959e-01,
    1.815534293848145e+02,
    -4.671338216212535e-03,
    -3.206770137984926e+01,
    8.202082743128228e+00,
    -1.668725901238163e+01,
    9.881167476456359e+01,
    -4.176781710737003e-04,
    -1.686839585581744e+02,
    9.428311202564469e+00,
    -9.942479432238282e-03,
    1.677860810093556e+01,
    2.899493287327330e-01,
    5.610566699648976e+01,
    -2.011270981684378e+01,
    -6.123988976586925e-03,
    2.549781403617934e-01,
    2.625097958204826e+01,
    -1.996977755057294e+01,
    3.093276299300933e-01,
    -3.014513331450792e-01,
    -3.741227911218607e+00,
    2.731354126570239e+01,
    5.614794846817529e-02,
    6.243549134345977e+02,
    2.111918361968716e+00,
    5.041451549288695e-03,
    -1.141727785052463e+00,
    1.746104638687403e+01,
    -5.557234515666194e+00,
    3.512098952447048e-01,
    -3.236262634015863e+01,
    6.020910462584565e+01,
    1.037304576376412e+00,
    -2.765348053740108e+01,
    -6.456477168255240e-04,
    2.119410560712979e-03,
    -7.245606888667141e+02,
    1.311019370618749e-01,
    -2.391725601016902e-01,
    -2.604120727290694e+02,
    -4.725737453505759e+00,
    -6.916494626111348e-01,
    2.592396515315526e+02,
    1.803761118619000e-01,
    -5.464634483326734e+00,
    -1.475149375342229e+01,
    -3.360167311982072e-03,
    -9.003693776544329e-02,
    3.751681570214821e+01,
    -2.865215105677783e-01,
    -1.289119329230509e+00,
    7.128290685206966e+00,
    2.152537711651827e+00,
    3.813212822038588e+01,
    2.476710460545514e-04,
    -3.506407057356326e-01,
    5.359344236329516e-01,
    2.370548997164654e+00,
    2.013529783985901e+00,
    -1.144009170261322e-01,
    -2.510405392380391e+02,
    2.298063703417561e-02,
    -1.221762542993923e+00,
    -3.182879332564311e+02,
    7.167089537886641e-02,
    -7.229598888286259e+01,
    -1.198062584245135e+01,
    3.686177605390171e+00,
    -2.241746247040275e-03,
    -7.946210370042448e+01,
    1.754935076768910e+01,
    3.185607209356830e+00,
    5.942438668992451e-01,
    9.492779170050663e-01,
    -7.908723449720066e+00,
    -9.050877757890114e-03,
    1.922422910351769e+01,
    -2.974907687820438e+00,
    -7.064453881731175e+00,
    1.145132212329107e+00,
    3.153034616815733e-01,
)


H2O_BR_POL100_COEFFICIENTS = (
    1.980059421531693e+01,
    -1.335498419822311e+02,
    1.847637929920124e+01,
    9.220543731123132e+01,
    7.302451283841117e+01,
    -1.067343350815857e+02,
    5.583463850614897e+02,
    -4.304961166367229e+02,
    1.957164649046066e+02,
    -3.558631282396130e+00,
    -5.984645803463384e+01,
    1.932724162273972e+02,
    2.016014594068888e+02,
    -7.602920083244154e+02,
    -3.911710592236085e+02,
    -1.797777647329929e+02,
    -4.886341248587692e+02,
    2.346145236913489e+02,
    8.054512180323455e+02,
    9.878788272531996e+01,
    2.976617083089569e+02,
    1.147959751176199e+02,
    1.403757893061886e+01,
    2.722076393783170e+01,
    -2.139487357130525e+02,
    1.011293413943580e+03,
    7.276637546573882e+01,
    -3.472801632183696e+01,
    1.968022066536098e+02,
    -8.783359645181351e+01,
    -4.763689976543444e+01,
    -2.199875139241119e+00,
    9.628939891065446e+00,
    2.432428777733653e+02,
    -6.597383894734662e+02,
    2.257709537175536e+01,
    -2.247901292960740e+01,
    -1.748532190919984e+02,
    7.511483607230767e+01,
    -2.078200833671894e+02,
    7.685529563490256e+01,
    1.017881275775760e+00,
    -7.350681602831406e-01,
    -1.869940528178316e+01,
    -1.507307818653975e+02,
    -8.338613974790901e+01,
    -7.263120518970372e+00,
    9.136332905233170e+02,
    -7.556039321825431e+02,
    5.963532269756106e+01,
    -1.034377060972858e+01,
    -1.945590306335095e+01,
    1.181565046437024e+02,
    7.884947925544004e+01,
    -1.045411331797217e+02,
    -1.273309326460350e+02,
    7.861691685841791e-01,
    1.053033323908384e+02,
    -2.240836072719207e+02,
    -1.956457045702422e+02,
    -9.642612203845819e+01,
    -1.037778701445948e+01,
    7.267425717297104e+00,
    -7.654256198034189e+01,
    2.808183632924786e+00,
    -4.837957190017528e+02,
    1.695433992280225e+01,
    1.735293303245865e+00,
    -4.338922157888211e+01,
    1.621707467402586e+00,
    -4.411721985569323e-01,
    8.131548818857900e-02,
    1.797439491487942e+01,
    -8.907663331601800e+01,
    9.369170187189007e+01,
    -8.813489245432478e+01,
    -1.061469300996965e+01,
    1.521451183930107e+02,
    -2.987409893769933e+02,
    2.107913772036339e+02,
    -3.949268495252012e+00,
    -3.142399678690226e+00,
    2.863472435954939e+01,
    -3.723518282468374e-02,
    -1.513477475902004e+00,
    -1.873029036510124e+00,
    7.473604874259247e+01,
    4.866902536809487e+01,
    1.712395775593357e+02,
    1.267737627072832e+01,
    -4.352888658015883e+00,
    -1.092424338821057e+01,
    1.983700854734736e+00,
    -4.138791553526112e+02,
    5.603778204770716e+01,
    9.675715943922256e+01,
    1.396091714295578e+01,
    -8.808370190158391e+01,
    9.601737319680516e-01,
    -4.354458932868860e+02,
    2.072674365733874e+01,
    1.365778789404558e+00,
    -1.143353719267456e+01,
    1.531435938850802e+00,
    -3.775681574335045e+02,
    -6.495121878809964e+01,
    2.073468784037226e+01,
    -5.972378603433835e+01,
    -6.818219795832036e+01,
    6.760450580016310e+01,
    3.251707633772684e-01,
    -1.348653418015042e+00,
    -2.301998954301339e+01,
    -2.726038488905109e+00,
    -1.746651889889902e+01,
    -8.381424914831847e+01,
    3.736948852497962e-01,
    4.873500466857298e+01,
    -4.341947853861146e+01,
    -1.833309860967315e+01,
    -6.165335864657094e-01,
    7.804862189630535e+00,
    8.527857178054191e-02,
    -2.853355859609290e+00,
    -9.656305333879341e+01,
    1.186509180883746e-01,
    -1.364383277851844e-01,
    -1.377334067851904e+02,
    6.547456213311180e+00,
    -1.895291031533184e+02,
    1.753842344397056e+02,
    2.199928984450503e+01,
    -1.784005338761391e+00,
    -4.652047912100946e+02,
    1.430633479894355e+01,
    2.438456681714269e+00,
    -3.142553089069667e-01,
    1.102996989526857e+02,
    -2.833112445022263e+02,
    7.010110156893987e+01,
    4.199954512245218e-01,
    -7.308011923524858e+00,
    -3.531278989244809e+01,
    -8.818422068412629e+01,
    8.584828694433077e+01,
    -2.136135204985244e-01,
    3.644341539938940e-01,
    -1.107023640970981e+01,
    3.202655766868452e+02,
    -2.552279018102712e+00,
    -3.530050871787222e+00,
    3.250206029998530e-02,
    3.967383157509303e-01,
    -1.994407229490107e-01,
    -5.201446916571689e-02,
    1.075000969116850e-01,
    1.732308308154709e+02,
    2.059510033538488e+02,
    1.141834421828348e-01,
    8.375690839693362e+01,
    -3.118020394649576e-02,
    1.954904938426249e+00,
    1.717126336344230e+02,
    3.010090115583989e+02,
    -4.473372091961258e+01,
    5.606038068243684e+00,
    -8.800591623849033e+01,
    1.668794083839759e-01,
    -2.768209869418800e+00,
    -3.834318155944404e+02,
    6.165549077470199e+00,
    -4.323465802460606e+01,
    4.246603969903940e+02,
    5.831451134103917e+01,
    -1.693907443769479e-01,
    9.335053593260674e-01,
    -3.802408284294820e-01,
    -5.439292687608318e-01,
    -4.849861438335725e+01,
    1.699271879091120e-01,
    1.216999655412023e+00,
    2.072658033116701e+02,
    2.346060684866349e-01,
    2.506704906845009e+00,
    1.546063049997708e+02,
    -1.418480178091446e+00,
    4.553120712464626e-03,
    1.342137497049742e+02,
    -2.064239881279332e-01,
    -7.209118756605127e-03,
    9.621452620056742e+00,
    -6.379848372616468e+01,
    2.785868746731064e-01,
    4.106510985055601e-02,
    -1.854705281345932e+02,
    -2.808456003780750e+01,
    5.067000622901705e-03,
    3.165963412429242e+01,
    4.499026168546438e+01,
    1.106257959015740e-01,
    -8.433395726947190e+01,
    -3.105822680910005e-01,
    -3.051802514267071e-01,
    5.901999845632899e-02,
    5.944547254638071e+00,
    5.441059049261467e+00,
    -2.160400540795592e+02,
    -7.935965681722600e-03,
    5.582965694742883e+01,
    -3.184691401940586e+01,
    2.177832710560740e-02,
    -9.648665397326096e-03,
    9.782827010332256e-01,
    -3.563632463739964e-01,
    -2.075692838196640e+00,
    2.696542159198379e-04,
    4.561050599928094e+00,
    -4.346362779096489e+01,
    2.348112037947100e-01,
    -3.284669871457272e-01,
    5.831789141446134e-01,
    3.848011856241563e-01,
    2.926366568137216e+00,
    4.322736867560500e+00,
    -8.110660259174611e-01,
    1.806870002016827e+02,
    1.152956320892057e-02,
    2.827658269363072e-02,
    1.900845780199303e-01,
    -6.623697347780103e-02,
    2.807406282154622e+00,
    1.935146087764766e+01,
    9.607566419457472e+00,
    -2.226629111285688e-02,
    2.580281390096265e+01,
    -1.018013744715790e-01,
    -3.711964516350474e-01,
    -1.741554720391442e-02,
    1.028299754896591e+01,
    2.406437461121485e+00,
    -1.286787845722923e+01,
    -1.646822976955974e-01,
    8.941552762308791e-03,
    6.994799185475577e+00,
    -2.369266195814206e-03,
    -1.360801421901297e-02,
    2.424725131465122e-01,
    3.205721069036435e-01,
    -2.105484459064627e+01,
    -5.344261608412906e-03,
    4.067528910873541e-03,
    -1.152673310315664e-02,
    6.052207077961856e-01,
    7.730883441100590e+00,
    7.286102246042051e+01,
    5.350208382710735e-02,
    1.353697349462219e+00,
    8.169826176472807e+00,
    -3.071127297826783e-03,
    2.819175803557217e+01,
    5.746224067047675e+01,
    5.088429858289650e+00,
    -2.996273314298618e-01,
    5.128244775877389e-02,
    2.445218879463541e-02,
    -2.055433227608843e+01,
    5.507578896602160e-01,
    -1.690626773811515e+01,
    -1.022464440754965e-01,
    2.375919872680917e-03,
    1.325681005505889e+01,
    5.981428939119415e-03,
    -3.493760594495422e+00,
    -1.072310281547183e-02,
    -2.828825250472447e-02,
    1.167133560616738e-02,
    -1.172494314778376e+02,
    -1.704322623052994e-03,
    -3.379100523560781e+01,
    7.683467937692585e+01,
    2.893269404077742e+00,
    8.510379270160226e+01,
    -1.807094441906752e+01,
    -3.405687643753511e+00,
    -2.957316684659342e-01,
    2.101984158581279e-03,
    2.173847154011593e+00,
    3.142742351454616e-01,
    7.101420765702669e-02,
    -1.790586474755296e+00,
    -6.097423621144401e-02,
    1.023797228866959e-01,
    -1.610066666308936e+00,
    -3.616992293705847e-03,
    -5.370536580664615e+01,
    4.346480073706008e+00,
    3.574000607525206e+00,
    8.388430721081228e+01,
    6.803543530741865e-01,
    1.717291461857037e-01,
    1.235891664007598e+00,
    -8.168157606182805e+01,
    -1.654755245387035e-04,
    -6.226175580810562e+00,
    2.708221284116472e-01,
    -3.731319128325307e+00,
    -9.707403241548553e+00,
    3.942962048419984e-02,
    2.750950071587226e+02,
    -1.961880024960117e-02,
    2.797694438950586e+00,
    7.677053625360525e-05,
    -2.490602947779096e-02,
    -8.038288926433392e+00,
    -2.479578955452606e-03,
    6.485109623460472e-02,
    -1.967989897663437e+00,
    -3.629778948089279e-01,
    8.881126487231763e-01,
    1.202412326547582e+00,
    -5.892858466939290e-01,
    3.848733102705656e-01,
    7.449553896856018e-01,
    -2.152432875114137e-03,
    -2.093736059426137e+01,
    1.175091622821439e+00,
    -2.923603359174393e-01,
    2.067783923764265e+00,
    -3.237896660909327e+01,
    5.009593229529358e-04,
    7.803506103817403e-05,
    1.008636223821969e+00,
    -9.938817448949179e+00,
    -7.744790918766838e-02,
    2.044040959211102e+01,
    -1.142184393785743e-01,
    1.428344900522842e-01,
    -3.183736114447971e-02,
    -9.453047677304173e-01,
    -2.586595858473860e+00,
    -2.317580481736019e-02,
    -6.302695765587535e-01,
    -2.023941437405230e-01,
    -9.313201072806313e-01,
    2.646042364033770e-01,
    -4.609438712713012e-01,
    -2.475947404306181e+00,
    -9.534463262729058e-02,
    5.183965030867636e+00,
    5.963187428459596e-03,
    7.148089834718338e-02,
    -2.019590340524677e-01,
    2.559995149346920e+00,
    2.191108135258058e+00,
    5.709165043940408e-03,
    5.284279757492509e+01,
    1.865661601504362e+01,
    1.050460676301363e-01,
    1.946339111696552e+01,
    2.494730560687518e-03,
    7.354798695508933e+00,
    7.856061753684589e-02,
    -1.271383443726341e+01,
    1.310539590097947e-01,
    -2.447471152545285e+00,
    5.529698821539287e-01,
    -1.130206624302438e-01,
    -3.654357888330041e+01,
    2.776160956659139e+00,
    3.989671708848009e+00,
    -8.510403875762943e-03,
    7.321424125443300e+02,
    -2.400201418027549e-01,
    -5.822211551240140e-02,
    -1.807320542208281e+00,
    5.554699578588745e+00,
    -1.164552317328342e+01,
    3.987483315777185e+01,
    -2.497467991795655e-01,
    -1.191151353388779e+00,
    3.436186835818029e-01,
    -4.488508068951773e+00,
    6.116515500107889e-01,
    4.392265299936516e-02,
    -1.716464811313613e+02,
    3.630124289536317e+01,
    8.788570199314592e-02,
    -4.300245568791327e+02,
    -1.400751395722789e+00,
    2.050651903136763e-01,
    -8.174797695327864e+01,
    -3.633423184845060e+01,
    -7.970644156994799e+00,
    -2.368155432904140e-02,
    -4.447630928480837e-02,
    2.370718879278548e-02,
    -1.860575636610765e+00,
    2.496179729591361e-01,
    -3.171768674166855e-01,
    -2.830994790127602e+00,
    -1.362958562960494e-01,
    9.522885224651072e-01,
    -1.129447390806947e-02,
    -2.328250486166383e-01,
    8.239429906620959e-04,
    1.176418694511150e-02,
    2.527207656952961e-01,
    -3.424269197346751e+00,
    -1.414084256181953e-01,
    2.261613550849727e-03,
    -4.768282116967812e-01,
    3.320249981492121e+00,
    -6.450892737233001e-04,
    -8.172452015929962e+01,
    -1.788211764125082e+00,
    1.233071656922576e+00,
    -9.750717401839945e-01,
    -5.880473899164952e+00,
    2.849120399023876e+02,
    -2.431094655185551e+00,
    2.125434475437620e-01,
    -2.315486960389526e+01,
    8.306416250069555e-04,
    -4.304128035636471e-01,
    -1.297166781286814e-01,
    -1.230479344751477e-03,
    3.196549690096002e-06,
    -5.350507717184359e+00,
    -8.290239835635084e+00,
)


H2O_CS_POL0_COEFFICIENTS = (
    -1.105614770018504e+02,
    -9.825030328753317e+01,
    2.469761906977259e+01,
    2.788317993155662e+02,
    -6.062664083643927e+00,
    -3.741665956957034e+02,
    -4.740936688380801e+02,
    -8.877142771836617e+01,
    1.180234852991351e+02,
    3.682076035469317e+02,
    3.108023044224163e+02,
    1.287659355270088e+01,
    1.592439915706151e+02,
    -2.775432788771330e+02,
    2.064799167184454e+02,
    -3.331547423558126e+02,
    4.743755550859896e+02,
    -1.864004393107394e+02,
    3.716829939023386e+01,
    -3.348361135011235e+01,
    -9.831744507349990e-01,
    -1.156267953848431e+02,
    2.284601361404158e+01,
    -4.891595642211557e+01,
    -2.989363384962454e+01,
    4.482940253627178e+02,
    -2.285085233875727e+02,
    4.776061422971304e+01,
    3.834149540960037e+02,
    2.222894882566486e+02,
    6.671354177580045e+01,
    -1.700302146214687e+02,
    6.207552951749027e+01,
    -1.025197106746872e+02,
    -1.410160374462876e+02,
    -3.660835808472705e+02,
    -3.981302735601237e+01,
    -5.270893224772454e+02,
    -1.233211720143845e+02,
    5.412683207532332e+02,
    2.034818465064892e+02,
    -6.826083382797242e+00,
    5.895031322817691e+01,
    -9.583486958377181e-01,
    -2.445242022297921e+02,
    1.580020204296660e+01,
    -3.646607183233935e+02,
    1.447151540875708e+02,
    7.137695447957800e+01,
    9.594785702077712e+01,
    -1.777849775629444e+02,
    1.238721276075003e+02,
    -1.040047241176219e+02,
    1.823861643866948e+02,
    -4.459530138568504e+02,
    -5.243305510933263e+02,
    -1.104748527918317e+02,
    -9.073615878777875e+01,
    -1.051256457308386e+02,
    4.091935756403835e+02,
    -1.002076824685990e+02,
    2.088038168184983e+01,
    -7.231478228551527e+00,
    6.297382545811266e+00,
    1.852906221571916e+02,
    7.451754219090476e+01,
    4.840101021692220e+02,
    -3.754231533931470e+01,
    -2.125771807700588e+02,
    2.353905317691336e+00,
    1.370412862407883e+01,
    -5.139401677985342e+00,
    6.523241767805041e+01,
    2.942002472678039e+02,
    7.086819849184143e+01,
    3.433820934265406e+01,
    -6.216825967116808e+00,
    2.033804337158872e+01,
    -8.456966011825597e+01,
    1.569611998264279e+01,
    -9.508083201325652e+00,
    -6.507536208863169e+01,
    7.145358398408574e+00,
    -4.557266584352331e-01,
    -2.117096207864242e+00,
    -3.841691901567331e-01,
    -5.378386028960161e+00,
    -5.244414063557453e+01,
    -4.495330051017976e+02,
    2.396633829063228e+01,
    -2.730288629634323e+00,
    -2.072089447659238e+02,
    2.108351475739068e+01,
    -9.469754213728872e+01,
    4.051287698068053e+01,
    6.832562458541442e+01,
    7.401540348939028e+01,
    2.666883179221836e+02,
    -2.651569493400016e+02,
    -3.131334844459640e+02,
    5.825916085612047e+01,
    1.407580697233732e+00,
    -9.101323653614169e+01,
    1.102728253643473e+02,
    -8.726723661296101e+01,
    -3.730434776391323e+01,
    -1.601830935550024e+01,
    2.328052055412077e+02,
    -1.904190150381032e+01,
    -6.521051547201651e+01,
    2.084811574221049e+01,
    -5.064662956826123e+01,
    -3.859445540885740e+01,
    -1.639726898913287e+00,
    9.674353695855485e+00,
    -2.788910605667716e+01,
    1.621553547673256e+02,
    6.003936278621079e+00,
    -2.730388717602010e+01,
    1.069497841468938e+02,
    -1.671660653792345e+02,
    -1.354559658489634e+02,
    4.957559096213681e+01,
    1.512809401300308e+02,
    -1.860144539355574e+02,
    8.161114066538198e+01,
    -2.833614536372128e+01,
    -3.134958922960918e+01,
    1.225644510971418e+02,
    -4.452114310460258e+00,
    7.311496335262363e+01,
    -1.130530952134716e+02,
    -1.111651433294307e+02,
    -4.013283697811922e+01,
    -2.263969721130914e+02,
    1.154180813904560e+00,
    -1.222614372217950e+01,
    1.076751186026539e+01,
    1.018314284507953e+02,
    -2.512161847959364e+01,
    4.167599969898210e+00,
    -5.434040843325138e+00,
    4.114834347267835e+00,
    2.446038214482556e+02,
    2.909026819598851e+02,
    -9.899290781861922e+01,
    -3.108354337495328e+01,
    -4.457964018136954e+01,
    -4.070578453460354e+02,
    -5.435823345632069e+01,
    4.955430343179063e+02,
    2.585043478855473e+01,
    1.137549462179738e+02,
    7.824978109927986e+00,
    -1.119566133543612e+01,
    6.331892348627441e+01,
    1.369566609250454e+02,
    1.552271295217863e+01,
    -1.858097232215445e+00,
    -5.787204027192023e-01,
    2.158761600685430e+02,
    3.998159759513873e-01,
    4.249854737025240e+01,
    -8.620024659771502e+01,
    1.918261803769699e+02,
    2.536915433259739e+01,
    2.248226390793862e+02,
    -1.572041510331164e+02,
    6.644897424121524e+01,
    -1.110343716605393e+02,
    1.480936314786786e+02,
    -1.153938076706837e+00,
    -3.796762897176976e+01,
    2.914429390865374e+01,
    -2.354313902702882e+02,
    -1.378337688446476e+02,
    -9.684136931518290e+01,
    -1.149462978592395e+01,
    -3.076753036999822e+01,
    -1.874250937563757e+01,
    -1.475847026927634e+01,
    2.014076146401490e+02,
    4.848957435914275e+01,
    2.544869889456467e+01,
    2.614721346697518e+02,
    -4.070326642027972e-01,
    1.364686949725344e+00,
    -8.556746853449104e+00,
    6.128344886524192e-02,
    -1.218116279063094e+00,
    1.434920310956369e+02,
    -1.073359725944321e+02,
    -9.111729290962156e+00,
    -1.819495060473891e+01,
    -2.907308072824336e+01,
    1.942947189399996e-01,
    9.660103549314716e-01,
    -7.516056366880602e-01,
    -9.722814902002726e+01,
    -8.936860643138607e+00,
    -6.086822447289836e+00,
    2.637399797573739e+00,
    -1.181859039629708e+00,
    1.170168193509044e+02,
    3.415846718420897e+01,
    1.608852846294307e+01,
    5.686109222246864e+00,
    -6.854382886872917e-01,
    2.236536974447503e+02,
    -8.749637288363395e+01,
    -9.345530201001659e-03,
    1.193394952158277e-01,
    -6.314942278051090e-01,
    -7.068477347383371e-02,
    8.705770563053491e+01,
    1.039483307466623e+01,
    -1.478806882457309e+01,
    5.302637461982467e+01,
    9.377677680553811e+00,
    -3.146619415867709e+00,
    1.642955509318426e+00,
    -1.855057641271880e+00,
    1.081458319080681e+01,
    -4.649946125268850e+01,
    2.336579118764239e-01,
    1.752528792249326e+01,
    -6.492043525483640e-02,
    -8.209273140539071e-04,
    1.109375364210087e+01,
    5.092414848008199e-01,
    2.301567893100067e+01,
    -1.628945317020414e+01,
    -8.907295919783651e+00,
    4.697422003791315e-01,
    -8.423409395706429e+00,
    1.681083401379382e+00,
    4.074224865842680e+01,
    -1.565733400470429e+01,
    -4.207172874699131e-02,
    -3.542602337503396e+02,
    -4.195702598147291e+01,
    4.457398994346142e+00,
    2.174566448997237e+00,
    1.608996056900799e+01,
    -1.705791694619859e-02,
    -4.052321824113289e-02,
    2.491504102402621e+01,
    8.787663197162603e-01,
    -1.304101930991467e+00,
    -8.627986877293894e-01,
    -2.479263400799576e+00,
    -3.525376519201321e+01,
    2.362953756574752e+00,
    -2.752780942294413e+01,
    1.979522004637356e+01,
    -5.362256164131713e+00,
    -5.452839073300055e+00,
    2.368662816219302e+01,
    -7.472554481279775e-02,
    -1.503233622408940e+02,
    7.766977770411194e+01,
    1.753017446221560e+01,
    2.315030233572208e+00,
    1.052094783874922e+01,
    -4.646933500343461e+01,
    2.295923887521127e-01,
    5.529535183375861e-02,
    -2.018668518606739e+00,
    -2.167513945253709e+01,
    -3.944717495315816e-03,
    1.349091914864801e+01,
    -8.268036888713294e-01,
    6.510702187168299e+01,
    1.945045367904351e+01,
    1.773430498597573e+00,
    3.113081592982548e-01,
    -1.766911482155688e+01,
    -6.002917430218244e-05,
    -1.563631926932225e+01,
    4.134949960426065e+00,
    -2.329062064031548e-01,
    6.381524957113400e+01,
    -2.549667403845790e+01,
    4.403238114076532e+01,
    -1.936227270962694e+00,
    -9.705217709968339e-02,
    9.171975461539960e+00,
    -1.464332016189016e-01,
    9.997840935634372e+01,
    -6.497026209563885e-01,
    -1.390785011405785e+00,
    1.149782047445961e-01,
    -9.521463054003470e+01,
    -3.831565915376657e+00,
    -6.045944049407567e+01,
    9.003289771673762e+00,
    -1.274777332416889e+01,
    2.635073759743661e+01,
    -1.372995063503555e-01,
    -1.649473185859130e+00,
    -6.141154080574189e+00,
    -7.346064810363689e+00,
    -3.615274244950342e-03,
    1.415876141030011e+01,
    4.954110876938050e-01,
    2.536650610906116e+01,
    -6.102641036142714e+01,
    1.506266027495302e-02,
    6.031585519663399e+01,
    -2.693138435423308e-04,
    2.627669617344733e+02,
    -3.008387037670570e+00,
    -1.254758308340180e+02,
    7.649523230011636e+01,
    7.849585263888429e-01,
    7.675870968047101e+00,
    6.035866755397181e-01,
    1.592586654042987e+01,
    4.308446728656245e-02,
    2.591959404905246e+00,
    -6.925650020610672e+01,
    6.990381937656812e+01,
    -1.011059939123210e+00,
    -7.974397778206370e-01,
    2.159596544762071e+00,
    1.567347338717625e+01,
    -4.516382991868071e+00,
    1.300938986499199e+01,
    -1.222431367637576e+02,
    -1.221675713091563e+00,
    1.392006143991481e-02,
    -1.775742293001351e+02,
    -2.048774199775675e+01,
    -1.636388888975205e+01,
    -4.276406658027285e-02,
    9.960820941689584e-03,
    -7.607958982500798e-01,
    1.354041537061910e-01,
    1.969483002377140e+01,
    -2.230574086607968e+01,
    3.815481758710325e+00,
    -2.023377428851041e-02,
    1.142568530388813e+01,
    -5.976653891221181e+01,
    -9.610812722416156e+00,
    -1.492199978183326e+02,
    -2.778803360480031e+00,
    -2.504918776582176e+00,
    5.956432338679324e+02,
    -3.441131551008656e+00,
    2.769001255655415e+01,
    4.304163109934117e+00,
    3.556592057262577e+00,
    1.695598234716563e+00,
    3.439125506010050e-02,
    -1.882633198897570e+02,
    2.821783584935865e+01,
    -7.272227183538491e-02,
    -8.076798186403286e+01,
    -4.765125713481653e+00,
    -5.857660600349405e+00,
    4.731487817265911e+00,
    -2.457682310445076e+00,
    -4.752244684459252e+01,
    -4.476640476228796e+00,
    5.079237742641035e+01,
    1.657217747874428e-01,
    -2.941198268921083e+00,
    5.553523367279293e+00,
    -4.914791534680772e+00,
    -2.242575529520054e-02,
    1.029344735841188e+02,
    1.658516098726170e+00,
    -4.085099333542323e-01,
    4.623230516744044e+01,
    -4.735085857657388e+00,
    1.673061160501111e+01,
    4.055537387522292e-01,
    1.293138244273198e+00,
    -3.028924778398887e+01,
    9.550688719021658e-01,
    5.178673135077571e+00,
    3.025999569588632e-01,
    -2.597120950891387e-01,
    -4.500132188597743e+01,
    -1.459182537070393e-01,
    2.094893030538693e-02,
    -7.442731447905632e+01,
    6.398936074733645e+00,
    2.063688783108456e+01,
    8.493451755999496e+01,
    -1.121723101441336e+01,
    -2.090444982988485e+01,
    -4.932291626928944e+00,
    1.145113261659942e-01,
    5.889951288548299e-01,
    3.057841690682318e+01,
    -1.492278701223528e+00,
    -1.291218281531360e+00,
    -2.118658907127782e+01,
    5.645319926282220e+01,
    -7.913769274187072e+00,
    -2.895871239184272e-02,
    3.999689279508760e+00,
    3.570795085352875e+00,
    6.040483537232118e+00,
    1.961145192444221e+01,
    -1.681418437881552e+00,
    -1.457061215906534e+01,
    1.292421784360771e+00,
    5.055793012285910e+00,
    1.021653225310645e+00,
    -1.238844416982697e+00,
    9.136542983073189e+00,
    3.224201202772262e+01,
    1.337064526736697e+01,
    1.376458483424400e+00,
    -8.836088713761910e+00,
    1.292481179950134e+02,
    -1.130620105268816e+00,
    2.780500648948220e+00,
    1.186712246202522e+00,
    -2.407643988967958e-02,
    1.154539703064144e+00,
    3.173975945739663e-01,
    1.722326704167514e-03,
    7.823922992400654e+00,
    -2.997093696628805e+01,
    6.078832499225732e-02,
)


H2O_F_POL0_COEFFICIENTS = (
    1.115710584309605e+01,
    -1.193272008992895e+03,
    3.969662219068674e+02,
    1.695262101759848e+01,
    1.678990770434885e+01,
    -8.248953791934971e+01,
    1.582434728649788e+03,
    -7.257434363774589e+00,
    3.795663157426047e+02,
    -4.339092258706976e+02,
    -1.150611351262662e+02,
    1.016179332588498e+02,
    -5.045177211701738e+02,
    -1.771324365670002e+01,
    -1.319760469436475e+02,
    2.436181410499855e+01,
    -6.889194022691826e+02,
    3.134301901091815e+02,
    7.493128109003690e+01,
    7.205144012857504e+02,
    3.117904509575211e+02,
    2.803961231006621e+01,
    1.193877894734111e+00,
    5.036744272982879e+00,
    -2.744237789152072e+02,
    4.831329962828161e+01,
    2.984431113174791e+02,
    6.126029499151729e+02,
    4.364414223433500e+02,
    -8.543692225908684e+01,
    4.397458754310048e+00,
    1.494958686993133e+00,
    3.600478686773468e-01,
    6.182575495266671e+01,
    -1.732647263409661e+03,
    1.148666631296332e+02,
    -6.136235168205497e-01,
    -5.045494504451824e+01,
    -4.150642735006620e+02,
    -6.596737654850155e+02,
    5.179211528881950e+01,
    -1.024307460167805e+01,
    -9.285254554153987e+00,
    7.843114471933353e-02,
    -2.062177642637984e+02,
    -4.659456975734106e+01,
    2.962186880797584e+00,
    1.739963792196411e+01,
    -3.045623430224952e+01,
    7.426390684699329e-01,
    -5.782005872688778e+00,
    -5.281852599708814e+00,
    -2.106307107592931e+02,
    1.196661069728557e+03,
    5.232785557617594e+02,
    -5.829777627954418e+02,
    1.260344446070777e+01,
    1.591527441090214e+02,
    -3.379700711700823e+02,
    -4.462158758179151e+02,
    -1.523315745138803e+00,
    -1.817750487029594e+02,
    2.068476848776330e-02,
    -5.148312382990439e+00,
    6.280354506205541e-01,
    -3.529266942416351e+01,
    -8.972367224277489e+00,
    5.236631358308194e+00,
    6.147035794694592e+00,
    -7.040315421851029e-05,
    -1.796239260780934e+01,
    1.383718134249057e-03,
    5.786381847420462e+00,
    -3.794503825332864e+02,
    4.365285581238793e+00,
    -3.711128454566120e+02,
    -1.420662380588864e+00,
    1.018586753279760e+01,
    -2.316426662470293e+00,
    8.872937232311911e+01,
    4.437776291315709e-03,
    -4.192252408231498e+02,
    -7.988453889292563e-03,
    8.662566425676907e-04,
    -5.947996575507158e-04,
    -1.140505623187442e-05,
    -3.630116524326596e+02,
    7.709985877987363e-01,
    5.879281920240333e+02,
    9.650299507264598e-02,
    -1.166243153229489e+00,
    1.822167431985037e+01,
    -4.956075453641049e+00,
    -4.364316007208227e+02,
    4.322368248025969e+01,
    4.207642411283056e+02,
    5.588425074424760e-01,
    -8.597750223419240e+01,
    3.978659241593144e+00,
    -1.424708039464321e+01,
    -9.793006535783614e-01,
    9.311515006632069e-04,
    -2.806833971712192e-01,
    -4.452549646766939e+00,
    -9.813756524283137e+01,
    -1.135234822163827e+00,
    -1.184227105416931e-01,
    2.153692362946498e+02,
    -6.301277624256896e+01,
    -4.155871348054909e+00,
    -2.125388689208399e-02,
    2.055385106551621e-01,
    -5.331505742400785e+00,
    1.993221252108368e-04,
    -3.620201212393272e-02,
    -4.022708121162232e+02,
    -5.622663314984511e-01,
    6.281176683635048e+01,
    -1.581439675681376e+00,
    -6.090147523374340e+00,
    -1.687277020051027e+00,
    4.280816986061289e+01,
    -9.450305276157647e-02,
    -2.627801811455631e+01,
    -3.989741815448474e+01,
    -6.653841829774554e-02,
    4.189551672371926e-03,
    -6.555405490655600e+02,
    7.245363231824112e+00,
    -2.285521219143915e-02,
    3.687288166384286e+02,
    -5.154266174341934e+01,
    -2.002201663032391e-01,
    -1.026941054722420e+01,
    6.142145341081017e+00,
    1.160218194686079e+00,
    3.125545030218749e-03,
    -9.293036869900570e-02,
    -9.798696001166383e+01,
    4.333349661906652e+02,
    -2.376293407082479e-03,
    -1.169049110476799e+00,
    3.998967738805113e+02,
    -2.114208876610745e+02,
    1.677823620733672e+01,
    1.137181597984663e-01,
    -3.314644912665200e+00,
    -6.012795348201094e-01,
    3.168291805844169e+02,
    7.598969641040710e+00,
    -3.324326216735202e+00,
    2.596439849837381e-02,
    5.856802448776367e+00,
    3.238350931540902e-02,
    3.266448757493128e-02,
    9.574365840637514e-03,
    -1.996806793314754e+02,
    4.171309266032503e+00,
    -1.768737105803806e-02,
    -4.235705175852395e-02,
    -8.242469277966732e-02,
    -2.228432301364662e-05,
    1.886254061836053e+00,
    2.253538591530946e+01,
    2.326345359502027e+01,
    9.752066567229216e-01,
    3.616122865877596e+02,
    1.412582379348337e-01,
    4.558140103549338e-01,
    -7.112742456369661e-01,
    -4.089846790812935e+01,
    2.127917679078970e-03,
    -1.515577228703986e+01,
    2.023740330109482e+00,
    -1.649890243317130e-02,
    -1.704219301339478e+01,
    -3.309680933226609e-02,
    1.774569482067680e-03,
    9.924992804450102e-01,
    5.638441028503731e-03,
    1.274227558551333e+01,
    -6.255365401055470e+02,
    6.591888857902133e-02,
    -7.482533678250189e-03,
    4.728485849550323e+02,
    2.935784659175086e-05,
    5.399973516175232e-06,
    1.116193209058208e+02,
    -2.626149272393885e-04,
    3.188781196410090e-04,
    -1.581772926781157e+01,
    9.377097547701798e+01,
    -5.265313499213095e-02,
    3.083916922568073e-03,
    -8.290232158882581e+00,
    -1.156061178888658e-03,
    4.995677113584070e-04,
    1.192890640106363e-04,
    -6.193136714051090e+01,
    5.486339014407987e-03,
    -1.853885039505693e+00,
    -3.805430409073363e-03,
    2.905120789584853e-02,
    4.227398051446016e-02,
    1.121412747675376e-01,
    -9.425133538110280e-01,
    -7.298348431126816e+01,
    1.350883037448233e-04,
    -1.308349075087242e+00,
    -2.229324666043181e+01,
    -8.282815634427246e-05,
    3.286167197929310e-03,
    -1.276735512085659e-05,
    -8.913139095899351e-03,
    -3.743452633276481e+00,
    -9.212495438171797e-06,
    1.762002288235788e-01,
    -9.536887911442812e-01,
    5.686850110747012e-01,
    1.102369714166957e-03,
    4.494573703114610e-04,
    1.615980339094722e-02,
    -1.035752789507867e+01,
    3.496354284922245e+00,
    2.585648420129485e-02,
    9.240117538675435e+00,
    -2.107895134430371e-05,
    -5.649384829538424e-09,
    -1.039827560397074e-03,
    1.067538693576774e-03,
    1.695629251900921e-01,
    -5.278169955854597e+01,
    3.706842681524774e-01,
    -9.001765593252159e-07,
    1.271798100269051e+02,
    -1.998946629388486e-04,
    8.306284520150541e+00,
    -8.690414749586697e-02,
    9.678184450536004e-02,
    2.839183410141954e+01,
    -7.795402799888851e-01,
    1.738930094274763e-02,
    -2.120700714456120e-04,
    5.269190454631077e-02,
    -1.361558095568755e-06,
    1.578393375999378e-04,
    1.792587982745157e-01,
    -1.127314613772218e-04,
    4.027228993255028e-03,
    -1.019791008355128e-04,
    8.103885459047254e-06,
    -7.171575862450858e-03,
    1.295767516990922e-02,
    8.715333537009382e-02,
    4.318405926668830e+01,
    6.028294890758200e-03,
    1.435042184555412e-02,
    2.023602761305192e+00,
    -5.899234704456886e-04,
    1.457623729206747e+02,
    -4.128212419456803e+01,
    1.527943207219620e+00,
    -4.780514228765284e-01,
    3.652627422166506e-03,
    -2.398418700194091e-02,
    -1.391245159240435e-01,
    2.049151369462070e-04,
    -2.343754986074360e-01,
    -5.687200029501202e-02,
    -1.988239615366616e-03,
    1.124810920213362e-01,
    -2.132297308277390e-03,
    1.661240005303578e+01,
    -5.013873405371942e-02,
    -1.477493983525050e-02,
    -2.167490690788525e-04,
    -3.616037118915832e+00,
    -8.486974928938241e-07,
    -9.169410133636836e-01,
    1.371751331536849e-02,
    6.704729952550755e-06,
    -3.045558018766800e+01,
    -5.894901963110802e-01,
    -9.016984024065036e-01,
    -2.041628915601485e-03,
    2.487537864853113e-04,
    -1.118862623143910e-02,
    -2.071229121273308e-02,
    8.496633151666785e-02,
    -1.784664226267480e-06,
    7.330844080567837e-05,
    2.888246313349221e-01,
    -4.724995429467906e+00,
    7.462179071499582e-04,
    -6.945407921989299e+01,
    8.295142986188961e-01,
    -2.659208100773103e-01,
    2.985252983103774e+01,
    -1.791632409609556e-02,
    3.136852811546221e-01,
    3.069462872098327e-01,
    -3.079837949543951e+00,
    3.477425813116624e-08,
    -3.925728787768207e-01,
    -2.850255834563680e-04,
    2.098923004103419e+00,
    2.860344133248350e+01,
    -2.259141379780579e-07,
    4.359218711690419e+00,
    1.761037328356583e-08,
    -1.306343370955502e+01,
    -9.656526861659508e-05,
    -5.628716030571163e-02,
    4.901568264778067e+01,
    -9.694411765336628e-04,
    -1.096211393633790e-02,
    5.561994525058697e-06,
    2.714590978142892e+00,
    -7.131894416630983e-07,
    8.795732906689619e-04,
    1.175564609446734e+01,
    4.644857132220284e-01,
    2.041648737423591e-04,
    -1.288608273703116e-04,
    -1.512259572915990e+02,
    7.714244330202196e-01,
    -1.125063221625452e-02,
    -4.562941317784604e+00,
    2.154031048979504e+01,
    7.049190692747547e-05,
    2.039102739248482e-04,
    2.233169119359461e+00,
    -7.166360778464463e-02,
    -1.946988084828044e-02,
    3.025184231781914e-01,
    5.629098814743005e-07,
    -5.254648670924301e-04,
    1.263835229241843e-06,
    -4.951329114055532e+00,
    -3.047358897795185e-01,
    -3.027409276252231e-01,
    -1.457294783842027e-04,
    -1.461959722430127e-02,
    2.380276088006527e+00,
    6.151097350964654e-03,
    3.392207687425468e+00,
    6.283810359720357e+00,
    -3.933013034328344e-04,
    -8.292268103012229e+01,
    7.157858393946652e-06,
    4.519661371886331e-02,
    -1.152138519844072e-02,
    2.844583776711475e-01,
    -3.296018853094886e+00,
    8.982959088299241e-07,
    5.352344146849390e+02,
    4.961700874083939e-01,
    5.402295885406405e-07,
    4.782949760152809e-01,
    -1.926972840891169e-04,
    5.809261946834385e-01,
    3.042289611699304e-02,
    1.933307232864427e-03,
    -4.593697400788258e+00,
    5.910771186708430e+00,
    -1.465970375102547e-01,
    2.682247508967355e-05,
    -1.667263568440595e-02,
    -3.230588459691733e-02,
    1.721227210492023e+00,
    2.260262483243192e-05,
    1.076417479314221e+03,
    3.213536863162889e-02,
    -4.819058752436142e-07,
    -1.264003995686197e-02,
    2.529311164785714e-01,
    -5.515732147953849e-01,
    1.863575444517667e-03,
    1.638613121613747e+00,
    5.410616509860519e+00,
    1.174408144113707e-03,
    -2.247270648940011e+00,
    1.448474091705456e-05,
    3.043338799575442e-06,
    -6.205095594614261e+02,
    -2.855858072187877e-04,
    -5.164863212781075e-05,
    -5.660472986080040e+02,
    8.734480589940344e-01,
    -3.908890322011626e-03,
    -4.850756468491659e+02,
    3.891781393594193e-02,
    -1.867862509391158e-01,
    1.376880786584604e-01,
    -4.262099615007692e-06,
    1.784461610305943e-05,
    -2.084979201181443e+00,
    1.917571843776111e-04,
    2.012803089401482e-02,
    -1.593868404427194e+00,
    8.061466521261881e-02,
    -5.255344777758795e+00,
    1.147071381032450e-07,
    -2.913542888180548e-03,
    -9.698813267352063e-05,
    -1.764261437214373e-02,
    -7.825303996542653e+00,
    -1.197595011490233e-03,
    -5.143657419087954e+00,
    2.341974219748562e-05,
    1.098271917035399e+00,
    -8.531379182758213e+00,
    -3.776132771660581e-05,
    4.082393424415623e+02,
    1.359599428271394e+01,
    -6.438961880566584e-02,
    -3.656963107569570e-04,
    1.051898239447730e-01,
    1.042826719924058e-01,
    2.423450179197417e-02,
    1.294121226112055e-03,
    2.621295425656095e-02,
    1.920477050891365e-03,
    -2.800678424297989e-05,
    -1.382017674214584e-01,
    8.614122611630060e-04,
    6.639386825514764e-04,
    1.043370525483802e-02,
    1.862399522998303e-02,
)


H2O_F_POL50_COEFFICIENTS = (
    1.073521509858902e+02,
    -9.516157011739464e+02,
    4.046446854730594e+02,
    2.684056181409260e+00,
    1.132356346524585e+01,
    -8.213869755861555e+01,
    1.632730902558642e+03,
    -5.023611713236790e+00,
    2.350188949219313e+02,
    -6.355202967463597e+02,
    2.543874487169771e+00,
    -6.227538336768142e+00,
    -4.388158116436284e+02,
    2.154596775967533e+00,
    -3.578712610756831e+02,
    2.829562660344074e+02,
    -6.802665094929455e+02,
    2.146959245164051e+02,
    2.354255257927450e+01,
    5.047881014126529e+02,
    2.366385816949568e+02,
    3.747262972812530e+01,
    1.229972678904453e+00,
    1.788808136705485e+00,
    -6.515125947800989e+01,
    1.452587937495524e+01,
    1.129701001843353e+02,
    6.965535578977369e+02,
    -1.678951678799702e+02,
    -1.712636432712867e+02,
    4.348337158437380e+00,
    -1.583961335477333e+00,
    3.036052309522655e-01,
    1.059359547766253e+02,
    -1.869074363940666e+03,
    3.110164857513538e+02,
    -3.125524396970618e-01,
    -3.361569232009623e+01,
    -3.786397572090053e+02,
    -7.261240769640262e+02,
    4.573477161217998e+01,
    -7.355527159001428e+00,
    -1.222130781992410e+00,
    4.001312103327628e-02,
    -2.006892303316477e+02,
    -2.617017679435509e+01,
    2.548480550905483e+00,
    1.301488428300158e+01,
    -2.972398997978161e+01,
    6.903805078547008e-01,
    -1.429258582853682e+00,
    -3.033494052447547e+00,
    2.943426697364954e+01,
    4.240031440984162e+02,
    9.145573085411191e+02,
    5.940008718039419e+02,
    1.973060517461552e+00,
    2.417004343127676e+02,
    -2.476789358604833e+02,
    -3.441425769619610e+02,
    -8.388596739437143e-01,
    -2.595557807881024e+02,
    1.259601927019923e-02,
    -3.437504145440748e+00,
    -3.475769692892099e-01,
    -2.731528631132593e+01,
    1.577582613837924e+00,
    3.945547863087423e+00,
    1.115856016619179e+01,
    -5.770251547866797e-05,
    -5.527393939765658e+00,
    1.464236155972382e-03,
    4.025958286804990e+00,
    -3.250665124658216e+02,
    2.854531755742281e+00,
    -1.516760152382110e+02,
    -1.724593197319505e+00,
    1.048566276270605e+01,
    -1.814192278199455e+00,
    4.285100155361351e+01,
    -3.095051786149683e-03,
    -1.426402646649524e+02,
    -5.393096954458344e-03,
    3.481305059375304e-04,
    -7.583685159726943e-04,
    -9.307450141524142e-06,
    -1.022205325965669e+02,
    5.186593434065205e-01,
    5.583346862294292e+02,
    7.559593267765997e-02,
    -6.427958791102486e-01,
    7.797092239152343e+00,
    -2.144019501851125e+00,
    -1.851111607930101e+02,
    1.548802361794406e+01,
    4.278718965257144e+02,
    3.804246623642180e-01,
    -1.654150264066117e+02,
    -6.527173547758947e+00,
    -6.531529362220196e+00,
    -3.051913941169250e-01,
    7.143201433074913e-04,
    -2.843043130625754e-01,
    -3.324912965712205e+00,
    -2.876372126738114e+01,
    -9.698869829182454e-01,
    -5.617451068108543e-02,
    -1.319496077660442e+02,
    -5.291387566589661e+01,
    -3.976268002065879e+00,
    -2.705414255614804e-02,
    7.115700998363991e-02,
    -2.295655608921901e+00,
    1.235643842518665e-04,
    -2.709083380971820e-02,
    -2.097413723876512e+02,
    -1.379043251420022e+00,
    5.554017926460835e+01,
    -1.833260486521062e+00,
    -2.491865220671430e+00,
    -2.700951268473636e+00,
    2.772227605096284e+01,
    -4.998029025585164e-03,
    -1.177238359186254e+01,
    4.253179253015650e+02,
    -7.097278302302862e-02,
    1.331379016440658e-02,
    -5.461709574906725e+02,
    3.233666605049937e+00,
    -2.159736672069288e-02,
    1.248353823619130e+02,
    -8.884907368942032e+01,
    9.274480251878299e-01,
    -8.968464870170250e+00,
    3.962803336222371e+00,
    4.728413422366079e-01,
    -2.416408280496649e-03,
    -5.026338712224362e-02,
    -5.024670829845785e+01,
    2.796617445442395e+02,
    -1.702314446476587e-03,
    -1.359392384104582e+00,
    7.882436724480351e+01,
    -8.574064830225996e+02,
    1.429797071062223e+01,
    3.874945743954219e-02,
    -3.513754006774341e+00,
    -5.676880174107425e-01,
    5.355388903263888e+02,
    5.595545086041587e+00,
    -2.897545380269393e+00,
    7.946044340270460e-02,
    1.159804402127643e+01,
    2.190475961177480e-02,
    -1.156579759625370e-03,
    1.121993623965332e-02,
    6.562485662627845e+02,
    3.478124558826923e+00,
    -7.381390078800234e-03,
    -1.450911715169336e-02,
    2.652150605848307e-02,
    -2.840450865792365e-05,
    4.549747072059862e-01,
    1.902143034562135e+01,
    6.077338041491357e+00,
    5.609311129846049e-01,
    -8.815238540809280e+01,
    -1.759953240287106e-02,
    2.727981711621977e-01,
    -3.116137428347538e-01,
    -1.770378733113821e+01,
    2.593950590844230e-03,
    8.990737697624532e+00,
    9.513988041083911e-01,
    -1.333317606176436e-01,
    -2.017290640413461e+01,
    -2.902605996469224e-02,
    2.529920922626399e-03,
    2.701807099663843e+00,
    7.342418754998276e-03,
    2.663342138069830e+00,
    -7.572853905023019e+02,
    1.418805681323169e-01,
    5.384791878814134e-03,
    4.253440679582341e+02,
    1.355840495885413e-05,
    1.673574141316983e-05,
    6.165397497055201e+01,
    -2.260937791145775e-04,
    1.818605056359076e-03,
    -1.339766524667227e+01,
    -4.806787571338197e+02,
    -2.572782576790360e-02,
    2.223246459828038e-02,
    -6.647633323810396e+00,
    -1.813214176069091e-03,
    1.259134681998546e-03,
    6.493503329380818e-03,
    1.448477610577902e+02,
    1.805027476226420e-02,
    -1.862780544802215e+00,
    -2.307411942708710e-03,
    2.414410617917062e-02,
    2.347651173824628e-01,
    1.320075511068968e-01,
    -6.009631528465964e-01,
    -4.260272382689715e+01,
    2.028764680307838e-04,
    2.699296255386320e+01,
    -1.927659996873764e+01,
    -4.044159576284854e-05,
    9.298153616562974e-03,
    4.601412585391022e-06,
    -9.573727970391972e-03,
    -2.703592506446358e+00,
    -5.345380602858206e-04,
    1.926045811890184e-01,
    -5.825691738809755e-01,
    1.112289587248240e+00,
    -1.660105289323692e-04,
    3.298659984260346e-04,
    2.659276932859718e-02,
    -2.549930480220040e+00,
    1.587086451743453e+00,
    4.477559419010580e-03,
    -8.725423510445871e+01,
    -1.897031901289137e-05,
    -1.411155555182223e-08,
    -5.702841110593586e-05,
    1.817855335117454e-03,
    1.684623848631161e-01,
    -2.262218739150707e+01,
    4.281257931765856e-01,
    -2.652297569611659e-06,
    6.800911446129713e+01,
    -1.258933802690505e-03,
    1.149717287305481e+00,
    -3.296147457577480e-01,
    8.642348180304373e-02,
    2.581716632800579e+01,
    -1.617587226136812e+00,
    9.953607076277673e-03,
    -2.755846889105968e-04,
    4.416953044651143e-01,
    -1.236302518058847e-06,
    1.301448978798970e-04,
    -1.270094297405168e-01,
    -1.165820598964183e-04,
    2.249224693052373e-03,
    -1.556051413696064e-04,
    -2.697645331180230e-05,
    -2.909823556942877e-02,
    1.989009511587592e-02,
    1.859736521086481e-02,
    4.296627761546134e+01,
    1.107078543531937e-02,
    1.109945969327695e-02,
    3.547209953302472e+00,
    -1.220498453809194e-03,
    1.418088214559492e+02,
    1.025055049864758e+02,
    6.288784117946477e-01,
    -7.354542587531439e-01,
    1.096535269402860e-02,
    -3.534036390405661e-02,
    -6.006419958937797e-02,
    2.429598134124543e-04,
    -2.334249973445452e-01,
    -1.130157137663158e-01,
    -2.842198407984430e-03,
    3.828339940508538e-02,
    -1.196165123484953e-02,
    4.929693125196059e+01,
    -2.340283948296732e-01,
    -7.195410645711013e-02,
    -1.470863865601005e-03,
    -3.589438446925354e+00,
    -9.292518601033429e-05,
    -5.910909815310830e-01,
    1.044439639163862e-02,
    1.368101626714237e-05,
    -2.311731058647632e+01,
    -6.075439671802899e-01,
    -9.795655351097032e-01,
    -1.416504656016734e-04,
    2.187786387443799e-03,
    -8.550129686644226e-03,
    -1.013175249287636e-02,
    3.334682705960463e-01,
    -7.541415254830344e-06,
    1.348086686000480e-04,
    7.228406111003178e-01,
    -1.436778797662553e+00,
    7.506460865153454e-03,
    -6.570778477158412e+01,
    5.370457983651743e-01,
    -1.536326127513367e-01,
    1.432937350816820e+01,
    -2.414303896326994e-03,
    2.714981529496655e-01,
    2.722699026323875e-01,
    -4.238614363830981e+00,
    6.040274468147042e-08,
    6.211682180884201e-02,
    5.060143516351148e-04,
    2.548658816814800e+00,
    3.284888860995820e+01,
    -2.549144489450526e-07,
    4.120060644605471e+00,
    3.554203355760238e-08,
    -7.463080043027190e+00,
    -2.934346338530081e-03,
    -3.419545292266487e-01,
    3.671826083889387e+01,
    -4.549378922261510e-03,
    -2.731993918612322e-02,
    2.752832780249149e-06,
    1.125247032876049e+00,
    -3.004737870183470e-06,
    3.994209777875907e-04,
    4.798631709463820e+00,
    -4.430876980211089e-01,
    5.549936848045756e-04,
    -4.505038971099494e-04,
    -1.228823396246125e+02,
    9.124785912100242e-01,
    -1.711968801165871e-02,
    3.842146163647922e+00,
    9.676375644296327e+00,
    1.581049420525844e-04,
    5.251505535113031e-04,
    2.456261334788565e+00,
    -4.833018369393354e-02,
    2.359748131789079e-02,
    1.619438114209302e-01,
    -4.617155403264071e-08,
    -4.119623709772645e-04,
    2.486712228526680e-06,
    -3.311328476823991e+00,
    -1.121117169152358e+00,
    -4.034962213322026e-01,
    -2.830153497744153e-04,
    -2.572372146002648e-02,
    1.303639349927538e+00,
    6.417357635543649e-03,
    3.080352909485670e+00,
    2.674954422422047e-01,
    -2.976631522835448e-04,
    -9.195459061665845e+01,
    -4.464825609814974e-05,
    1.473768864552153e-01,
    -4.962405832566636e-02,
    3.213441264509274e-01,
    3.812739199567163e-02,
    1.340244033241428e-06,
    2.943657735152810e+02,
    5.404032120739646e-01,
    1.782649378736073e-06,
    4.829079747138918e-01,
    -1.057641391956672e-03,
    9.442343243672932e-02,
    3.200722546893629e-02,
    7.997175313919279e-04,
    -4.271506940867230e+00,
    8.185617222462950e-01,
    6.570735267431373e-01,
    -3.127625774417718e-04,
    -1.260695773574105e-02,
    -2.430425275695761e-02,
    1.213424772950902e+00,
    1.371804076289598e-05,
    1.086211751167761e+03,
    9.657952150690454e-03,
    -2.431909579919579e-06,
    2.751656880012468e-02,
    7.599833968083919e-01,
    -3.778945206806383e-01,
    3.013128468176665e-03,
    -1.204606360222336e+00,
    2.515795914873979e+00,
    -3.609563195938152e-04,
    -2.527599542686457e+00,
    1.851498716358741e-05,
    5.106483091286256e-06,
    -6.446737356835794e+02,
    9.394676650647683e-04,
    7.288025318265748e-05,
    -4.483655214851477e+02,
    7.644322526226991e-01,
    -6.184881259141128e-03,
    -1.696531441352741e+02,
    2.219563619962981e-02,
    -1.310155157245080e-01,
    2.688338671086778e-01,
    -4.199117008820954e-06,
    3.325118775841997e-04,
    -6.927233918973229e-01,
    1.359016259196429e-03,
    3.282826207409886e-02,
    -1.009280589208148e+00,
    7.083022113931518e-02,
    -2.711782759589786e+00,
    2.194238537995574e-07,
    -5.549967231793762e-03,
    -1.799484044890434e-03,
    -4.200606748689330e-02,
    -2.055621109150329e+00,
    -3.518715763304632e-04,
    -5.093398941477054e-01,
    6.982199276278816e-05,
    1.256764700702474e+00,
    -6.272106422664970e-01,
    -5.314091648097498e-04,
    3.722321809164679e+02,
    5.803836792266684e+00,
    -5.312975847864013e-02,
    -3.700868271079482e-04,
    -1.688824874335700e-01,
    -2.030753557292267e-01,
    1.011474980712783e-02,
    -1.290126208827141e-03,
    1.463178238945923e-02,
    4.976070536418526e-03,
    -4.732132526584964e-05,
    -7.225116893253974e-02,
    6.737974755908335e-04,
    9.619678976067131e-03,
    2.334580823968107e-03,
    7.686436219316948e-03,
)


H2O_I_POL75_COEFFICIENTS = (
    3.328235414306171e+01,
    -2.445161690197339e+02,
    -1.723616297153360e+01,
    3.088195964174597e+01,
    1.292297336573403e+01,
    -2.244372357533834e+01,
    6.533810451377436e+02,
    -2.618769177131760e+02,
    2.396830679052968e+02,
    1.384296685689339e+02,
    1.007346331812710e+01,
    5.012433377019573e+00,
    5.167965656474346e+01,
    -1.939327728104440e+02,
    -3.180787390117308e+02,
    -1.861374147480916e+02,
    -3.542916834101724e+02,
    1.027568388792026e+02,
    4.309820308120030e+02,
    1.163488224289240e+02,
    1.181719075076786e+02,
    1.144621486054318e+02,
    1.605700540589699e+01,
    8.033523511559293e-01,
    -6.435169094861140e+00,
    5.072993060071077e+02,
    -1.866869571038190e+01,
    -6.720789652668044e+01,
    1.862326940416779e+02,
    -5.323262887191718e+00,
    -3.128998064418820e+02,
    -8.226788411300820e+00,
    1.025963149416750e+01,
    1.118899416011454e+01,
    -9.051696440761605e+02,
    -1.004642455879279e+02,
    -5.864186213918679e+00,
    -1.483292832599617e+02,
    -3.743325930785792e+01,
    -3.816174920464491e+02,
    -3.514219038827239e+01,
    -1.750392106072302e+02,
    2.645827896592643e-02,
    -3.583565856761929e+01,
    -4.719767184743825e+01,
    -8.767337549560980e+01,
    -1.537540629554698e+00,
    7.852897957601699e+02,
    -3.339324055431832e+02,
    5.495226393329747e+01,
    -2.549793360197792e+00,
    -2.867629402874784e+00,
    7.833766939618680e+01,
    4.224296260535560e+02,
    -9.625221929027978e+01,
    -1.798568692522924e+02,
    -3.207243048635257e-01,
    7.655435177874907e+01,
    -1.590603436882650e+02,
    -9.527305499202123e+01,
    4.653218255292521e+00,
    -1.046533914481788e+02,
    6.469174122543440e+00,
    1.041915327432917e+02,
    5.980019023584839e+00,
    1.507267312146688e+02,
    5.696815558603389e+00,
    -6.539531748701400e+01,
    -8.248042748557141e+01,
    2.021784851940937e+00,
    3.204743499498806e-01,
    1.843189889825329e+00,
    1.166965064110522e+00,
    -5.064275086472949e+01,
    5.531884435255108e+02,
    -1.149575618275514e+01,
    8.008853840627217e-01,
    -1.594045054462613e+02,
    -6.095825100260884e+02,
    2.095426497154324e+02,
    -1.497598578445013e-01,
    -3.566370306628239e+01,
    2.351655269429706e+01,
    -1.490899947334889e-02,
    -6.423934552831240e-01,
    -1.692594492794068e+00,
    3.468432579120423e+01,
    1.273029651583161e+02,
    8.022759181767239e+01,
    5.335294732545164e+00,
    1.785983960950850e+00,
    -6.181175549295900e+00,
    1.999799439355768e-02,
    -2.824022450453774e+02,
    1.472422926108176e+02,
    -7.207939182274224e+00,
    1.019355883388374e+02,
    -5.961655534201045e+01,
    -1.992363302969528e+02,
    -2.679736951305131e+02,
    -4.750026598573231e+00,
    6.034821912872976e-01,
    -2.126319739931299e+01,
    8.508678993753959e+00,
    -2.973058927871054e+02,
    -1.548524504029952e+02,
    1.799818877202566e+01,
    1.217232945642461e+02,
    -5.705176670740070e+01,
    3.938980220556177e+02,
    7.721763190204864e-02,
    -2.284278244155553e+01,
    -3.450858421203424e-01,
    -1.528339856013008e-01,
    -4.000858555504816e+01,
    1.830222943170503e+01,
    -6.084408742618992e-01,
    1.703104315307452e+02,
    1.304268442927757e+02,
    -1.002029779075090e-01,
    -3.543309925720083e+00,
    2.769963117489027e+01,
    -8.594943453061779e-04,
    1.113999011930677e+02,
    -8.227980929815716e+01,
    6.991783608892566e-02,
    -5.565538111055108e-01,
    -5.139793715115899e+01,
    2.822633224915939e+00,
    -2.285529418550970e+02,
    1.438372427982243e+00,
    1.198909914276824e+01,
    -4.078081071537218e+00,
    -8.691074857975950e+02,
    -5.738318987354275e-02,
    -5.238564977005973e-01,
    2.962049761411509e-01,
    1.593283600043940e+02,
    -1.313496768791616e+02,
    3.677430460279775e+01,
    1.036609768149679e-01,
    -1.132529012599359e+00,
    7.749980993671573e+00,
    -1.344230583606974e+02,
    1.705325591894819e+02,
    -1.176887733616356e-02,
    -6.744659093522952e+01,
    -1.939390395280690e+01,
    2.852085637503777e+02,
    -1.859542291049455e-01,
    -6.952305397555860e+01,
    9.014091605135033e-02,
    2.090452914813847e+00,
    -9.601069854098226e-03,
    1.122648963468695e-04,
    7.236087783181647e-01,
    -1.219626584087989e+02,
    -2.401843600346155e+02,
    5.004469833889289e-04,
    2.529081987654369e+02,
    -5.227168526874219e-02,
    -3.995434620391005e+00,
    9.473239414674892e+01,
    4.268561216658744e+01,
    -2.317664899452661e+02,
    -6.882645464909726e+00,
    2.425428180930703e+02,
    3.383097759469614e-02,
    -9.350480289199218e+00,
    2.184992967976506e+02,
    -5.488976900269952e+00,
    -7.393026949115038e-01,
    6.331028694630935e+01,
    4.853851950863070e+00,
    -5.089587833257195e-01,
    7.340031321519069e-01,
    -1.050020386881979e-01,
    -2.769197804400043e+00,
    -1.344290878568555e+01,
    -1.392994399808315e+00,
    -3.352174108997562e-02,
    9.309996252373402e+01,
    7.561175810525057e-01,
    2.467183573634047e-01,
    4.863883222694594e+02,
    -1.437989981753425e+00,
    -2.805963311052766e-02,
    5.904180641540469e+01,
    -2.014953786355942e-01,
    -5.878356678650661e-03,
    7.505524343085490e+01,
    2.124198759205388e+01,
    1.760610549243840e-03,
    -6.173293541235062e-03,
    -5.628068459889748e+02,
    -7.022868005407361e+01,
    2.837448441077472e-03,
    3.383298402529046e+01,
    -1.783060654405141e+02,
    -2.276991598062443e-02,
    2.665880891809331e+02,
    -7.105107329405330e-03,
    2.632295350108074e-01,
    3.414739111831985e-01,
    2.944368502203097e+01,
    6.999942968794683e+01,
    -1.072974074592071e+02,
    8.626103293591679e-01,
    2.137646947843202e+02,
    -5.728150664830042e+01,
    1.995025667948458e-04,
    -1.356091782873596e-04,
    1.384923978953582e+00,
    -1.084610743061221e-03,
    1.577787357483005e+00,
    3.312679107001226e-02,
    7.807179488990220e+00,
    -8.067287547048666e+00,
    -7.636398563365814e+00,
    2.011865194177411e-02,
    -3.225006293156824e-01,
    6.763641810541347e-03,
    -3.018096631407269e-02,
    1.117836550275886e-01,
    1.074565771488582e-03,
    2.148968058168648e+02,
    1.076724354972741e-02,
    2.450406903744500e-02,
    -2.325128667224221e-01,
    -1.734964420600775e+00,
    9.614072388897029e+00,
    9.548939417245561e-01,
    3.661977129613391e+01,
    -8.689853947981722e-02,
    2.505484307456556e-01,
    -2.319211745243558e-01,
    -9.503988412784843e-02,
    -9.762430964654634e-02,
    3.252314095058579e+01,
    -1.150030099205926e+02,
    -9.486717485044539e+01,
    -7.050812537243227e-02,
    4.664009426197411e-03,
    2.013658863380010e+00,
    -4.856647950270352e-03,
    -6.604087967356099e-04,
    1.809561116162714e+00,
    -4.042079941857146e-02,
    -4.761433780525480e+01,
    -4.260288250513409e-03,
    -9.142758563156135e-02,
    -5.182843548385144e-02,
    4.275860578964878e+00,
    -5.621382949926767e+00,
    1.894330890234537e+02,
    1.584673538875140e-01,
    3.677654663740523e-01,
    6.985998133517215e+01,
    -5.426353868415988e-05,
    2.680237297893418e+01,
    -2.589922628328453e+01,
    2.489470019916599e-01,
    -7.094464894436708e-03,
    1.475367275751049e-01,
    1.022943625761789e-01,
    -8.813772464744861e+00,
    1.632128425286037e-01,
    -4.105984565197807e+01,
    -6.465958254055699e-04,
    -2.960381112599121e-06,
    8.474457713458081e+00,
    6.571920990296497e-04,
    5.917741699649988e+00,
    -6.108219656553278e-02,
    -4.382988204592767e-02,
    1.519987740322311e-03,
    -1.343828089550206e+02,
    1.016361711691187e-06,
    -7.313861779696953e+00,
    1.562335290417145e+02,
    7.450015459157741e+00,
    3.278026076068886e+01,
    -9.500521151652019e+01,
    -2.327154902773039e+01,
    -1.069855511473522e-01,
    2.497623246670957e-03,
    8.363681086352607e+00,
    -2.409619390502991e-02,
    -7.244363923448665e-03,
    -2.027323035474896e+00,
    8.039064836137108e-01,
    1.644271696768232e-02,
    1.279195534525243e+00,
    -1.335533447919865e-03,
    -1.793267896764539e+02,
    7.065685028447358e+00,
    1.559499984540122e+00,
    6.339547415606330e+01,
    6.350546244076574e-04,
    4.649354935225189e-04,
    -3.093258052225476e+00,
    1.111833478158043e+02,
    1.113394867749934e-01,
    -4.796567690873883e-01,
    2.763893868020264e-03,
    -2.198253480809245e+02,
    -7.222937380042052e+01,
    4.755217453416128e-03,
    2.776940644395106e+02,
    6.071109963155369e-02,
    3.126258748318150e+00,
    7.275657864057067e-03,
    1.531985254748205e-02,
    1.091788846076583e+00,
    -6.449608712077173e-04,
    4.039960262189708e-01,
    -3.294976520722815e+00,
    3.143000159681665e+00,
    1.509180956829632e+00,
    -2.095854029314125e+00,
    -5.092281284116512e-02,
    -6.317509860085363e+00,
    1.512676974009626e+00,
    -2.660820973575233e-03,
    -1.514029405516586e+00,
    9.138662086655916e+00,
    -2.560073449543568e+00,
    9.891546727069410e-01,
    -3.846753984890051e+00,
    -1.524617853632414e-02,
    -5.503809262494674e-05,
    -5.328394738168300e+00,
    -4.043440231650934e+01,
    -5.472886019316644e-01,
    8.246966103932465e+00,
    -3.435141605646787e-03,
    7.484154762967350e-01,
    -6.814953576787188e-01,
    -1.184481648464447e+00,
    -1.780738395526458e+00,
    -6.722403412124316e-04,
    -1.851311106148573e+00,
    -8.018448385292258e-02,
    -2.325795743139898e+00,
    1.645696241318401e-01,
    -6.286118166694905e+00,
    7.741701450731026e-02,
    2.749122853715247e+00,
    2.654247838855907e+02,
    1.627237936555241e-02,
    7.897890522704410e-03,
    4.984089024229726e-02,
    2.364284149829793e+01,
    -2.526789182975553e-04,
    -4.054417488247577e-02,
    -5.776569404026253e+00,
    3.880073972100020e+01,
    2.566726196021383e-02,
    2.130568185206688e+01,
    -4.785536831502481e-03,
    7.614326262244596e-02,
    8.443310311081844e-05,
    -5.630949466977446e+01,
    6.775694120006787e-01,
    -4.305320953014244e-03,
    4.656327590578354e+00,
    1.392867320495234e-03,
    -1.873211951384931e+02,
    3.843587917377590e-01,
    -4.556029316896095e-02,
    -9.903909741387860e-04,
    6.607545272397598e+02,
    -4.766298486885994e-04,
    -7.987083369375117e-02,
    6.106882443249910e+01,
    -2.284250468769152e+02,
    -6.148838097320591e+00,
    6.019980408609470e+01,
    -1.357248315259191e+00,
    -6.579788014375160e-01,
    -5.150510645410470e-05,
    -4.549982213247120e-01,
    4.236126269868614e-01,
    7.774621746546354e-02,
    -6.674974823085169e+02,
    1.119071795633172e+02,
    2.286153305155112e-05,
    -2.829099442276282e+02,
    -3.206398036468251e+00,
    1.862291105257610e+00,
    -6.045959065867330e-01,
    -9.271360118714425e+01,
    -4.922704542732896e+00,
    7.946522453181287e-03,
    -1.807243048825412e-02,
    -4.965119156172035e-03,
    1.269628597174779e-01,
    3.524080296923881e-02,
    -1.044535979764166e+00,
    -2.598731829520767e-01,
    7.241847550008365e-03,
    -2.703359829198348e-01,
    -1.188759830343957e-02,
    -1.243958373428192e+00,
    -6.762122337358464e-04,
    1.170031469474551e-01,
    1.048619143336960e-02,
    -1.271037868872907e-01,
    1.252313574132073e-02,
    2.217093180947701e-02,
    -2.426374003620405e+00,
    -1.861413270896985e+00,
    -5.180553500360096e-03,
    1.459351898229490e+01,
    7.436088420527437e-01,
    1.824793574135581e-01,
    -5.321707818814363e-02,
    -1.873184628962536e-01,
    6.655049620413054e+02,
    -4.423779790813189e-02,
    2.041554378062008e+00,
    -4.092464971459847e+01,
    8.920256117738579e-05,
    -1.850661652801404e+00,
    -6.077090158327547e-05,
    1.706147739456462e-07,
    -3.574012033194768e-03,
    -1.170070286942761e+01,
    -1.342403106690647e+01,
)


H2O_NA_POL0_COEFFICIENTS = (
    1.114874625194155e+01,
    -1.392280802439622e+02,
    1.698728586651959e+02,
    7.792479223513266e+02,
    8.210533520573966e+02,
    1.648602207613349e+02,
    2.121834767027918e+01,
    -2.120423050951069e+02,
    -3.159637230623922e+01,
    -2.264790645745899e+01,
    -3.770191951465837e+02,
    1.452052776355698e+02,
    -3.883628131686191e+01,
    -4.653464925958957e+02,
    1.706703927801058e+01,
    -4.692717466463515e+02,
    3.157031674278255e+02,
    4.923847100840660e+02,
    3.720342216227721e+01,
    6.750026732290128e+01,
    1.424471266739745e-01,
    -9.324068222018752e+01,
    3.483397853061628e+02,
    9.002891153640316e+01,
    1.129116870418761e+01,
    3.549517604815480e+01,
    -4.419048754132601e+01,
    -2.649207632786891e+00,
    3.413317398592998e+02,
    7.520493446183839e+02,
    -1.671957363701054e+01,
    -1.576104691800795e+02,
    2.788828636974372e+01,
    -1.754596202298942e+02,
    1.961405180628919e+00,
    -4.837929775533633e-01,
    -7.637194585526713e+01,
    -7.514864418167376e+01,
    5.274996781786719e+01,
    1.306067195280435e-01,
    4.345539927266763e+01,
    -8.709706025748503e+01,
    -2.040959775211554e+01,
    3.796458107782410e+02,
    -5.768316788502573e+02,
    -4.492836884055338e+01,
    -1.765803002777456e+01,
    5.167230026317952e+01,
    -3.561071672781663e+01,
    -4.294350415270305e+02,
    -3.878568623216025e+02,
    -1.762620944199057e+02,
    -6.241744145308080e-01,
    -4.695981684618813e+01,
    -3.356606592726620e+01,
    -2.159166263812912e+02,
    7.142593436641353e+01,
    -9.120596960133701e+02,
    1.999656358505969e+00,
    6.718477236352274e+01,
    3.758696274021242e+01,
    7.138547064482158e+01,
    7.428778413049815e+01,
    2.621329500399539e+02,
    4.475096469293125e+02,
    -9.610533997230696e+02,
    3.298441417950938e+02,
    -1.365261353254778e+00,
    8.679905500602804e-01,
    2.039247557003460e+02,
    3.080504619966198e+00,
    -1.051847089833117e+03,
    -2.860073515548039e+01,
    6.214948359376247e+02,
    2.338315490279646e+00,
    2.331823266655635e+02,
    3.732912191939026e+01,
    4.172175844944661e+02,
    -5.365926183772510e+00,
    3.221080820181662e+02,
    1.368590679044756e+02,
    3.638036334464650e+01,
    -7.463328341386346e-01,
    -9.248309113241677e+01,
    3.668539579821718e+02,
    5.659912675152029e+01,
    3.751405009184210e+00,
    9.568573495597603e+01,
    -8.363292890177509e+01,
    1.632213744624065e+02,
    -4.269761048111224e+02,
    -1.332563785455355e+01,
    7.756175748783615e-01,
    -4.105443703605666e+01,
    4.889531037949684e+01,
    -5.042045724352604e+00,
    -1.355667632640264e+02,
    -3.154649605477731e+01,
    -3.709325523564285e+00,
    -7.446623116421144e-01,
    3.171045519301057e+02,
    7.062296990676846e+01,
    -1.646055632433750e+01,
    1.867555965005234e+01,
    -3.268487717268563e+01,
    -1.157665820389149e+01,
    1.438280176905843e+02,
    2.913427885685006e+00,
    -4.537165467659422e+02,
    2.345917034093169e+00,
    1.228828053916307e+02,
    4.327690200614029e+02,
    5.930081482214706e+00,
    -1.681426370255053e+02,
    -1.155686028463594e+01,
    -4.880916859335315e-01,
    2.674975199565409e+02,
    -7.001831259771795e-01,
    -6.372781919547267e-03,
    2.677734181336534e+00,
    -4.596819629531301e+02,
    2.395801213762175e+00,
    1.444414169191474e+00,
    -2.217483755546223e+00,
    -4.412249893129190e+01,
    2.725585338817936e+01,
    6.154462290394183e+01,
    -1.497459068182148e+00,
    -5.666857133238220e+00,
    -7.743174494224741e+02,
    1.260662586987349e-01,
    9.874702363813597e+02,
    -1.167916290316971e+00,
    -2.984456561142025e+00,
    -2.264408457230843e+01,
    1.002547507848218e+02,
    9.321806967304135e+02,
    1.758592451464721e+01,
    2.707399659976510e-01,
    -8.339170429987173e+02,
    4.014237214371485e+02,
    1.798738385875854e+01,
    -7.259270683193208e+00,
    3.840012660226182e+01,
    2.176711273196029e+00,
    -2.148042809190680e+00,
    2.860481416691185e+01,
    -3.664516428195104e+01,
    -1.828679854744971e+00,
    -1.461106125312986e+01,
    9.573563218568795e+01,
    -6.397033827386170e+01,
    2.221676375965800e+02,
    -2.594651838570510e+01,
    -5.248959857450266e-03,
    -1.621309011513743e+02,
    -2.317538783924186e+00,
    -1.973224764602754e+02,
    4.415137777607158e+00,
    -1.945064807830734e+01,
    -1.717942099516946e+01,
    1.354260783049413e+02,
    1.976019196907990e+01,
    1.318919964032347e+02,
    8.238048999329536e+01,
    1.789168947639984e+01,
    2.646359982937143e+00,
    -8.325509228323078e+00,
    1.055942806916749e+01,
    -3.228979124497556e+01,
    -6.157539905059797e-01,
    -1.753517362055635e+02,
    -4.029962434349189e+01,
    3.832101063628935e+00,
    1.254615606667002e+02,
    -3.548682572589763e+02,
    -8.396057223650439e+01,
    4.807491751564310e+02,
    2.924332226805577e-01,
    7.175175551768259e+02,
    -5.350072037437975e-01,
    4.151499756311924e+00,
    -1.139475318517649e+02,
    -7.530524276372911e+02,
    -9.001634503829442e-01,
    -1.161755096133525e+03,
    1.393762654764850e+02,
    2.593169725272149e-01,
    -1.564298188060763e+00,
    -1.003134413976246e+00,
    2.548999240794092e+00,
    -9.049993668571316e-01,
    -3.366321248170882e-01,
    4.684290559099798e+00,
    1.275880259043551e+00,
    1.732180659081209e+02,
    7.608957151002667e+00,
    1.758779899759130e+00,
    -8.072943619526204e-01,
    -2.848213875215229e+01,
    3.510961935311513e+01,
    -5.559464062339888e-01,
    -2.320857495933878e+01,
    6.938807405983015e+00,
    2.266643688194902e+00,
    -1.532928005600155e+01,
    1.696019703499272e-01,
    1.003416991117861e+00,
    6.376867816701262e-01,
    -1.108527319086367e+00,
    1.858183324416514e-01,
    1.238642600132655e-01,
    1.412739173990157e+03,
    -1.261151827747909e-01,
    1.242941002382577e+00,
    6.750728774896426e+01,
    -5.014546578887016e-01,
    -1.031225233889713e+00,
    -9.412806368226628e+00,
    4.316901634017863e+00,
    4.338443209823068e+00,
    9.050113194526581e-01,
    1.460752084239953e-01,
    -2.194923752597870e-01,
    1.893626614375002e+00,
    2.871054195994188e+00,
    7.068544601395620e+00,
    2.755205296485640e+00,
    -2.038446925255958e+00,
    6.587031258636750e+02,
    -1.066920835854303e+00,
    1.201708319004876e-02,
    2.471438157658401e+00,
    1.426005795042605e+02,
    1.836710077355070e+00,
    4.597808802309272e+02,
    -1.405100717535467e-02,
    5.062608610847888e+01,
    -7.370434083173607e+02,
    -8.128920814288042e-01,
    1.763062314161384e+03,
    9.449016577546536e-01,
    -4.681029951089443e+01,
    -2.848831130812976e+02,
    8.246353410036340e+00,
    1.083423205494992e+00,
    3.816890862029663e-01,
    1.534376343797636e+00,
    -1.830416267135622e-01,
    1.912873671816679e+01,
    -5.331719557937982e+02,
    4.461766519770465e-01,
    4.352632277877231e+02,
    8.031985704295463e+00,
    1.827763387795260e+00,
    9.175545565818110e+00,
    -1.023267607567533e+00,
    3.230805858512095e+01,
    -2.400385093294114e+00,
    2.740431672937712e+01,
    -8.364676369356239e-01,
    -7.989994152014193e-02,
    -2.168004641906124e+01,
    3.645541307226071e+00,
    -5.245575872708362e+00,
    3.083067858140677e+02,
    -3.877454799643797e+01,
    8.674144978069325e+00,
    -4.559623456274434e-02,
    -1.440206743787074e-02,
    1.248559560245471e+00,
    -4.818463406433245e-01,
    7.574395160185048e-01,
    -2.219727630116625e+02,
    -1.688870475764388e+00,
    3.112722238416392e+00,
    -8.568610310367704e+00,
    -1.497673064864493e-02,
    1.334291713580965e+00,
    1.686424261244025e+02,
    -1.640703079156454e+02,
    -1.103363739569851e+00,
    6.511323054725859e+02,
    -1.036005020002490e+01,
    -1.805113814615374e+02,
    -5.222892194277994e+00,
    1.214435076917152e+02,
    3.699115754744986e+00,
    -2.330936958707273e-01,
    5.582427385071080e+00,
    -5.293675917815178e+00,
    5.569128679167905e+01,
    2.195049950818408e-01,
    2.459019211232702e+01,
    -3.702175671934383e-01,
    -3.231548381503636e+02,
    4.302268335557559e-01,
    1.414731762138796e-01,
    -1.202639009625953e+00,
    -2.456203979092671e-01,
    -9.765179925036106e-01,
    -8.355794185057215e+01,
    -1.202117985965339e+02,
    -5.500253371614224e-01,
    -9.255740570636809e-01,
    -1.511698676309417e+00,
    -1.347896814017533e+01,
    -2.593562575016558e+00,
    2.904392107272920e+00,
    3.674266559055233e+01,
    6.544184739492037e-02,
    3.343446589094379e+01,
    -1.021052615813464e-02,
    -5.247000275512235e-02,
    -6.826856720827581e-01,
    -1.491459699929801e+01,
    1.583396193582754e+01,
    8.545991294784802e-02,
    -5.023607577172719e+01,
    -9.898672675074471e+02,
    4.148362152565124e-02,
    -3.557241436678092e-01,
    -4.545516409646611e+00,
    -1.140566084395559e+01,
    -8.635086613311303e+00,
    -1.972541380306790e-01,
    1.174379790929116e+01,
    8.453691803144608e+01,
    -6.015995368226539e-01,
    5.913022749089081e+01,
    6.342954291678604e-02,
    -7.085063499330451e+00,
    -1.266629822653154e+00,
    -7.548103952263501e+00,
    -4.079422470277747e+00,
    -8.660033985848555e-01,
    -9.682883721836092e+00,
    -5.813774725329626e-01,
    -2.919845795444085e-01,
    3.837206372385237e+00,
    1.365219808999826e+01,
    1.390121033543334e+02,
    -3.264894189724884e+00,
    6.863338788647349e+00,
    3.505640733308688e+00,
    -7.048605298987248e-02,
    -1.960414530961892e+01,
    -1.826299921418051e+01,
    2.631401394943892e+00,
    -3.768936444009984e+02,
    4.688951363027688e-01,
    -4.606255464950427e+00,
    -2.221803035206337e+01,
    1.399043899105245e+00,
    -8.689231867949811e+00,
    1.691124622333338e-01,
    -3.323213696060329e+00,
    1.530510875166253e+01,
    2.441647702808222e+00,
    -4.023952752927858e+01,
    1.043557137573055e-01,
    6.015104948433586e-03,
    6.682948039457230e-01,
    -9.456553434007308e+00,
    -2.953678415924416e-03,
    6.481223055528095e+00,
    -8.504234773606814e+00,
    1.427827528368575e+01,
    2.815069812236429e+00,
    3.714633521075089e-01,
    4.098597725628894e+00,
    2.918715875570372e-01,
    5.142192954824663e-02,
    -2.972219593179631e+02,
    -1.118995580109641e+01,
    -3.858495105221124e+00,
    -6.200245111547895e-01,
    -3.207275554160645e+00,
    -8.206938582442487e+01,
    -2.048344491375887e+00,
    2.937520658097248e+01,
    -7.067014172460794e-01,
    5.547348686432350e+00,
    4.668768419760863e+02,
    -1.082396653321835e+00,
    -5.850534251061474e+00,
    -1.060033718980315e-01,
    2.207097116676641e-01,
    -2.301796424557802e+00,
    -6.736704582403734e+00,
    -5.369664423158307e-02,
    -1.432045091196551e+00,
    -9.502517587015149e-01,
    -6.266773161051472e+01,
    -1.473946229015096e+02,
    1.024056982946147e+02,
    -7.210222984331021e-01,
    -1.019130133650579e+02,
    6.972734308568870e+01,
    6.404966591596535e-01,
    1.634301503459131e+00,
    5.347608561335524e+01,
    -5.795323750197419e+00,
    -8.541614221537742e+00,
    -5.881822784601862e+01,
    5.107103347720154e+01,
    -1.003863161235391e-03,
    1.888986347185558e+02,
    -4.352765140012620e-04,
    -9.341870476031352e+01,
    1.413019033731703e+01,
    -1.688370049437318e-01,
    2.048761612108636e+01,
    1.427176291627693e+00,
    2.789062740014767e+00,
    8.483566576635144e+01,
    -1.919455805733226e-01,
    3.503155401514109e+01,
    4.272765200328918e+00,
    -2.627961963918309e+01,
    -4.158672960643414e+02,
    -1.136051892025480e-01,
    8.286306391593100e-02,
    -4.028399286500393e+00,
    2.489151027697777e-02,
    7.500433430865876e-04,
    -3.134736722614716e+01,
    3.920527931823975e+02,
    7.553232746626447e-01,
)


H2O_RB_POL100_COEFFICIENTS = (
    -2.243283187216157e+02,
    -2.449441044507246e+02,
    1.258440679196070e+02,
    1.794994389783666e+02,
    -2.154313261632096e+02,
    -1.073387568283169e+02,
    -1.758854958094831e+02,
    -2.977831152070315e+01,
    2.332012307614150e+02,
    -8.660974051107469e+01,
    2.207739262289079e+02,
    -3.722042000883695e+01,
    -3.497329325828402e+01,
    -2.460662423886733e+02,
    1.536722989313948e+02,
    -9.723324353640554e+01,
    5.573218091407585e+02,
    1.014781113225840e+02,
    7.057512761847011e+01,
    1.859603547763768e+02,
    -4.138850830459371e+01,
    5.380991984125634e+01,
    2.336985868236242e+02,
    -8.175616012986003e+00,
    4.167542633971097e+01,
    1.458876641996530e+02,
    -1.409689192034505e+02,
    3.334164000691352e+01,
    9.635884035203455e+00,
    1.807247598695684e+02,
    -1.439856978048483e+02,
    -1.065023753024244e+02,
    3.142728441183513e+00,
    -6.054610218196496e+01,
    1.056890290248972e+02,
    1.054572773984106e+01,
    -6.056337314769021e+01,
    -3.112954337830066e+02,
    8.727496214757564e+01,
    9.640379362905445e+01,
    7.963648241500397e+01,
    1.339549798312496e+02,
    1.210900224749711e+00,
    -5.367016463548116e+01,
    -1.594282163844225e+02,
    5.590898404415096e+01,
    -4.192009788476669e+02,
    2.777368907666193e+02,
    2.274176585181142e+02,
    2.065204010063241e+02,
    -9.451257084397834e+01,
    7.089105092939649e+01,
    -4.504557763569180e+01,
    1.247752624844365e+02,
    -2.150876703733641e+02,
    -9.552581841690918e+02,
    -6.071200192194154e+00,
    -1.314821454126417e+02,
    -5.189877574229473e+01,
    2.118901921283224e+02,
    -3.306214803070961e+02,
    -5.913822233078283e-01,
    -7.444036495125836e+00,
    -1.934429383234728e+02,
    -1.573132073737722e+01,
    3.061352381654751e+01,
    1.362375027478304e+02,
    -3.373401126941204e+01,
    -2.023335355814295e+02,
    2.244491062784982e+01,
    -2.462972387952878e+00,
    9.358699376755384e+00,
    -1.011908554529378e+01,
    4.037875955686660e+02,
    5.297916794820143e+00,
    5.222089014070671e+01,
    5.190358602110170e-01,
    2.809657399167399e+02,
    -1.148681351406651e+02,
    1.775553140591271e+02,
    -9.282923811865534e-01,
    -5.857716503407457e+00,
    1.181898073093837e+01,
    1.364780048107697e+00,
    5.477029055194310e+01,
    -1.286539627325463e+01,
    -4.641259097593242e+01,
    -1.806167313939077e+02,
    -4.021147540697918e+02,
    1.325108382570935e+02,
    -5.145875184398447e+01,
    -1.066323946958438e+01,
    6.877318066816435e-01,
    -1.663161635518736e+02,
    -9.214440795942505e+01,
    5.047169801279631e+00,
    -4.635307706790028e+02,
    8.654300396666379e+01,
    -2.578282263111156e+02,
    -7.918767750443476e+01,
    3.271660414882320e+01,
    3.647569052894947e+01,
    -2.675434917948717e+01,
    4.829452962509449e+01,
    -2.441515188892211e+02,
    -5.615625821646348e+01,
    -1.067609216168885e+01,
    -7.440381433249202e+00,
    -2.064556946975169e+01,
    3.775203088960629e+00,
    3.182077950500635e+01,
    -3.094052849579677e+01,
    1.421407089557442e-01,
    -3.831843662834452e+00,
    2.252420227564416e+01,
    -2.557840064471514e+00,
    1.247732488544452e+02,
    2.552981773675841e+01,
    3.533703419268580e+01,
    3.811952993406915e+00,
    -2.013009151728772e+02,
    4.294101204344934e+01,
    -1.302090299769055e-01,
    6.962801664649380e+01,
    -2.019937062312679e+01,
    -3.782828510240586e+00,
    -5.777126903171033e+01,
    1.541973518267816e+01,
    -2.618968473958332e+00,
    -1.751868906103741e+01,
    -4.783131104181017e-02,
    2.055611790770940e+02,
    2.246033067628072e+01,
    -1.074098547613624e+02,
    -3.362318112607684e+01,
    1.074687465042612e+01,
    2.068045826201591e+02,
    3.292132329383799e+01,
    5.342892466226975e+01,
    -1.505482990326501e+02,
    -8.270304136935914e+00,
    -2.216498315058420e+02,
    5.447111160076418e+00,
    3.840561214068481e+02,
    7.877434243337711e+01,
    1.828928023991494e+00,
    3.501679719259771e+01,
    -4.562897867371255e+01,
    -1.852415912600665e+02,
    -7.500599053575839e+00,
    5.510686476544256e+02,
    4.205731517214048e+01,
    1.206885534875296e+02,
    -4.542672247025332e-01,
    5.913358138602504e-03,
    2.892173400042033e+01,
    -7.976822591680646e+01,
    -2.520245182714056e+01,
    -5.073419643993958e-02,
    3.091914804624944e+01,
    1.965137992957602e+01,
    -9.525451052383117e+00,
    1.963961104782754e+02,
    -9.748642117514932e+01,
    1.672997806391834e+02,
    4.099676531216343e+01,
    9.868791560429511e+01,
    -1.512416845323235e+00,
    4.006870381791776e+01,
    -9.870716891138181e+01,
    -7.081041569731862e+00,
    -3.172614298762814e+01,
    -3.142069218868132e+01,
    6.798839835416747e+01,
    -7.576053332604181e+00,
    -1.708394111292453e+02,
    -4.642698911853424e+01,
    -8.131066912296435e+00,
    -5.062900982326932e+00,
    -3.152512193111028e+02,
    -1.131431079829122e-01,
    6.957687634041881e+01,
    -5.093524137958042e+01,
    3.346266266250310e+01,
    2.565306149765084e+02,
    -4.635128954219314e+01,
    9.560798567609159e-01,
    6.351689027694936e+00,
    -3.984400674528895e-02,
    8.878417519448804e-02,
    6.065986888381856e+01,
    1.457002897822201e+01,
    1.407984358716041e-01,
    -1.668674162184249e+01,
    -2.877001752019700e+01,
    1.818786980040736e+01,
    -4.165401716252582e-01,
    -4.095907318538644e+01,
    -5.166527625434354e+01,
    -5.048294043068572e+00,
    1.073328337270920e+02,
    -2.573860693700399e-01,
    -4.703216243915119e+00,
    6.258513249623692e+01,
    8.612954503558276e+00,
    -1.999387725898927e+01,
    1.309198384386858e+00,
    -5.564876850886455e+00,
    1.751286916875876e+02,
    -3.657377714307831e+01,
    -3.536414345637180e-06,
    4.769064960611979e-03,
    -1.519263305797363e+01,
    2.669241528310579e-02,
    9.159089634632318e+00,
    3.655054138291530e+00,
    -2.313107166422866e+01,
    3.188493151146943e+00,
    7.963912248247948e+01,
    -9.660240782710904e-01,
    2.988311505407677e+00,
    -4.802115414707573e-02,
    -2.490849499410433e-01,
    -1.003511562591322e+00,
    -7.130470495821052e-01,
    3.208178617909487e+01,
    -1.850616313245248e+00,
    4.687211815691458e-02,
    -4.618355230004064e+00,
    2.064879052855627e+01,
    -5.995852405306291e+00,
    1.555194784826019e-01,
    2.721403126605565e+01,
    6.373044153822304e+00,
    -3.676610427808749e-01,
    1.770268246714850e+01,
    2.836704384315712e-02,
    -9.177795644136360e+01,
    -7.471426743234963e+01,
    -1.126989068951806e+02,
    3.155372462991879e+02,
    -5.378567435269812e+00,
    -6.730285892825429e-01,
    -2.251544205007986e+01,
    -2.841243671284934e-02,
    -2.786326909815838e-02,
    -1.257547791949599e+01,
    1.550873107919678e+00,
    5.923945374138906e+00,
    1.061741356624157e+00,
    -5.084639475520285e+01,
    -2.157085494150632e+01,
    -7.234483823276290e+01,
    7.015507312474651e+00,
    -5.828447504294529e+00,
    1.429163197676326e+01,
    -1.333768402330452e+01,
    4.493871031342154e+01,
    1.749644355886605e-02,
    -1.234528434086175e+02,
    1.175181778161733e+00,
    2.885925540247689e-02,
    6.366065564082194e-01,
    2.868244409807195e+01,
    -1.510339127278811e+01,
    1.932659647432365e+01,
    8.407426977091621e-01,
    -3.804827537105629e+01,
    1.959386946096513e-02,
    -2.895909575928602e-05,
    -2.729222989578040e+00,
    -3.209644812967813e-02,
    -7.794801989185599e+01,
    1.397175144423083e+02,
    2.985763636901072e+00,
    6.769792404791443e-02,
    -4.344801482878430e+01,
    -6.059959478778862e-07,
    -6.010404250001844e+00,
    4.866523744686751e+01,
    -4.861326270065142e+00,
    7.119970941306169e+00,
    -3.121633678805455e+01,
    3.636792590542928e+01,
    -6.339778933396189e+00,
    -9.666072229415866e-01,
    3.210568254897404e+01,
    3.263630575699698e-01,
    4.118099850734604e-01,
    -6.213912823613015e-01,
    -9.873186644221898e+00,
    4.014557485598670e+00,
    -1.910830796914988e+00,
    1.003852281836773e+00,
    -2.477178137641936e+01,
    -6.203894072442505e+01,
    1.969578169741021e+00,
    8.734686282316812e+00,
    -2.433903461925436e-03,
    -2.307563487548258e-02,
    -1.645336161484814e+01,
    -6.041633459295137e+01,
    2.149931859855130e-01,
    -2.426809352787965e+00,
    -2.459267998445273e-01,
    -1.742771207467851e+01,
    -5.467827312564718e+01,
    3.227537967623854e-02,
    7.546239343478308e+01,
    -9.175243679967268e-02,
    -4.540543117704051e+00,
    3.612964159824675e+00,
    -2.433180089522087e+00,
    6.446914794586959e+00,
    6.907459104417481e-03,
    1.769660228038797e+01,
    7.930359157165142e+00,
    -7.093475913543475e+00,
    6.540925238395259e+00,
    1.453093561637229e+01,
    6.869683509392728e-01,
    1.484705265226953e+01,
    -2.223081405189488e+01,
    -3.837753255924312e+00,
    -7.709269703310548e+00,
    5.456562901386233e+01,
    -2.789863732442745e+01,
    -1.426008233114658e+01,
    -6.214764926114212e+00,
    6.190804058732636e+00,
    2.701813037318677e-04,
    -1.298469143947828e+02,
    1.255626280457061e+01,
    -6.350211940652289e+01,
    8.308836291572906e+00,
    4.146275500878590e-03,
    -6.193687891578076e+00,
    2.336977011067257e+00,
    -1.007954962427166e+00,
    5.355058538672223e+00,
    1.529493333582503e-01,
    -9.088798266961071e+00,
    -1.410178872345149e+00,
    -8.670452780870395e+00,
    2.252852521034835e-01,
    -1.242952737084916e+01,
    -2.328580842572753e+00,
    -2.658144808863315e+01,
    3.893447541361039e+02,
    -2.929665556510479e+01,
    -1.782792157089505e-01,
    4.456601081088837e+00,
    -1.291629631704621e+02,
    4.284516282938253e-02,
    5.086786725334397e-01,
    -5.617615308191460e+00,
    2.944376511855229e+01,
    -1.449055980290875e-01,
    -3.998712754380992e+01,
    -6.647379528956627e+00,
    2.475992076566774e-02,
    -1.352877897292113e-03,
    3.438100019140155e+00,
    -5.039793122476035e+01,
    -5.004980720077749e-03,
    4.809600928846707e+01,
    2.885056006976463e-03,
    -1.380610454229620e+01,
    -4.274023123957010e+00,
    -9.172843481665258e-01,
    -8.778473467037197e-03,
    -9.591495874178188e+00,
    -3.533099828245579e-03,
    -4.274782299456763e+00,
    4.403411698188135e+01,
    -7.886141745933216e+01,
    -4.422249320711288e+00,
    1.517739146850757e+01,
    4.731787004958280e+01,
    -9.366765052754227e+00,
    4.040803315321606e-01,
    1.039839607054145e+01,
    3.140142013020391e+00,
    -6.884029599175324e+00,
    -2.229349131015670e+02,
    -1.859433941037432e+01,
    -3.549014563504543e-04,
    -7.840078740229414e+00,
    7.027104932239660e+00,
    1.847229175476320e+01,
    1.179830667646010e+00,
    -8.207598296070882e+00,
    -1.374288300580197e+00,
    6.867270400352381e-01,
    3.819545415031014e-01,
    4.403681830041091e+00,
    8.767352405506698e-01,
    -1.101492833120719e+01,
    2.301750443690731e+01,
    1.573788893008088e+00,
    9.001773408764008e+00,
    5.091141016752800e+00,
    -6.838360974986858e-01,
    -2.139135485788375e+01,
    -1.534723201128804e+01,
    -8.062011612272080e+00,
    -5.556853885099252e-02,
    2.259581948664775e+00,
    -1.126443856024269e-02,
    -1.008702875260046e+00,
    5.342679653336167e+01,
    3.548728964834079e+00,
    5.768987463106535e+00,
    1.962601967662659e+01,
    1.559915467997043e+01,
    2.022481296543765e+01,
    4.258257983152095e+00,
    1.679688630171184e+00,
    1.604217368711257e+02,
    2.210608470182716e-01,
    -9.199436743872020e+00,
    1.537818490638085e+01,
    5.767070935509118e-04,
    2.686219982066855e+01,
    -1.596226914593955e-04,
    3.470924027550510e-07,
    -2.318096722648014e+00,
    3.020168349081242e+02,
    -8.876936623099642e+00,
)
